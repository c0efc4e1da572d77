"""Application DTOs."""

from .cart_dto import AddToCartRequest, CartDTO, CartItemDTO, SellerGroupDTO, UpdateCartItemRequest
from .catalog_dto import (
    BrowseResultDTO,
    CategoryDTO,
    CreateListingRequest,
    ListingStatusRequest,
    ProductDetailDTO,
    ProductDTO,
    SellerListingsDTO,
    UpdateListingRequest,
)
from .checkout_dto import (
    CheckoutOptionsDTO,
    CheckoutQuoteDTO,
    CheckoutQuoteRequest,
    NewAddressRequest,
    PlaceOrderRequest,
    PlaceOrderResponse,
)
from .dashboard_dto import DashboardDTO, SellerStatsDTO
from .message_dto import (
    ConversationDTO,
    MessageDTO,
    ReactionDTO,
    ReactRequest,
    SendMessageRequest,
    StartConversationRequest,
)
from .order_dto import CancelOrderRequest, OrderDTO, OrderItemDTO, OrderListDTO
from .profile_dto import (
    AddressDTO,
    CreateAddressRequest,
    FarmDTO,
    ProfileDTO,
    SwitchModeRequest,
    UpdateProfileRequest,
    UpsertFarmRequest,
)
from .return_dto import CreateReturnRequest, ReturnDTO, ReturnItemRequest, UploadedPhoto
from .review_dto import CreateReviewRequest, ReviewDTO, ReviewListDTO
from .wishlist_dto import (
    SavedProductDTO,
    SavedSearchDTO,
    SavedSellerDTO,
    SaveSearchRequest,
    ToggleResultDTO,
    WishlistDTO,
)
