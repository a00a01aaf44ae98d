"""FastAPI endpoints for carts, balance checkout and the listener's library."""

from fastapi import APIRouter
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from groove.config import get_settings
from groove.identity.account.account import Account
from groove.ordering.api.schemas import (
    AddToCartRequest,
    CartIdResponse,
    CartItemResponse,
    CartResponse,
    CartTotalResponse,
    CheckoutReceiptResponse,
    DownloadResponse,
    OrderLineResponse,
    OrderResponse,
    ReleaseSummary,
    StatusResponse,
)
from groove.ordering.cart.items import AddToCart, DecreaseCartItem, IncreaseCartItem, RemoveFromCart
from groove.ordering.cart.queries import find_active_cart
from groove.ordering.checkout.balance import pay_cart_with_balance
from groove.ordering.library import (
    album_downloads,
    get_order_for,
    order_downloads,
    orders_for,
    purchased_albums,
    purchased_tracks,
    track_download,
)

cart_router = APIRouter(prefix="/carts", tags=["carts"])
library_router = APIRouter(prefix="/accounts", tags=["library"])


def _order_response(order) -> OrderResponse:
    return OrderResponse(
        order_id=str(order.id),
        order_number=order.order_number,
        status=order.status,
        payment_method=order.payment_method,
        total=order.total,
        currency=order.currency,
        placed_at=order.placed_at,
        paid_at=order.paid_at,
        lines=[
            OrderLineResponse(
                item_type=line.item_type,
                item_id=str(line.item_id),
                title=line.title,
                unit_price=line.unit_price,
                quantity=line.quantity,
            )
            for line in order.lines
        ],
    )


def _release_summary(release) -> ReleaseSummary:
    return ReleaseSummary(id=str(release.id), title=release.title, image_url=release.image_url)


def _download_response(download) -> DownloadResponse:
    return DownloadResponse(name=download.name, blob_url=download.blob_url)


# --- Cart endpoints ---


@cart_router.post("/{account_id}/items", response_model=CartIdResponse)
async def add_to_cart(account_id: str, body: AddToCartRequest) -> CartIdResponse:
    command = AddToCart(
        account_id=account_id,
        item_type=body.item_type,
        item_id=body.item_id,
        quantity=body.quantity,
    )
    cart_id = current_domain.process(command, asynchronous=False)
    return CartIdResponse(cart_id=cart_id)


@cart_router.delete("/{account_id}/items/{item_type}/{item_id}", response_model=StatusResponse)
async def remove_from_cart(account_id: str, item_type: str, item_id: str) -> StatusResponse:
    command = RemoveFromCart(account_id=account_id, item_type=item_type, item_id=item_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.post("/{account_id}/items/{item_type}/{item_id}/increase", response_model=StatusResponse)
async def increase_cart_item(account_id: str, item_type: str, item_id: str) -> StatusResponse:
    command = IncreaseCartItem(account_id=account_id, item_type=item_type, item_id=item_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.post("/{account_id}/items/{item_type}/{item_id}/decrease", response_model=StatusResponse)
async def decrease_cart_item(account_id: str, item_type: str, item_id: str) -> StatusResponse:
    command = DecreaseCartItem(account_id=account_id, item_type=item_type, item_id=item_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.get("/{account_id}", response_model=CartResponse)
async def get_cart(account_id: str) -> CartResponse:
    cart = find_active_cart(account_id)
    if cart is None or cart.is_empty:
        raise ObjectNotFoundError({"_entity": "The cart is empty."})

    return CartResponse(
        cart_id=str(cart.id),
        account_id=str(cart.account_id),
        items=[
            CartItemResponse(
                item_type=item.item_type,
                item_id=str(item.item_id),
                title=item.title,
                unit_price=item.unit_price,
                quantity=item.quantity,
                line_total=item.line_total,
            )
            for item in cart.items
        ],
        total=cart.total,
    )


@cart_router.get("/{account_id}/total", response_model=CartTotalResponse)
async def get_cart_total(account_id: str) -> CartTotalResponse:
    cart = find_active_cart(account_id)
    return CartTotalResponse(
        account_id=account_id,
        total=cart.total if cart else 0.0,
        currency=get_settings().currency,
    )


@cart_router.post("/{account_id}/checkout/balance", response_model=CheckoutReceiptResponse)
async def checkout_with_balance(account_id: str) -> CheckoutReceiptResponse:
    receipt = pay_cart_with_balance(account_id)
    return CheckoutReceiptResponse(
        order_id=receipt.order_id,
        order_number=receipt.order_number,
        total=receipt.total,
        remaining_balance=receipt.remaining_balance,
    )


# --- Library endpoints ---


@library_router.get("/{account_id}/orders", response_model=list[OrderResponse])
async def list_orders(account_id: str) -> list[OrderResponse]:
    current_domain.repository_for(Account).get(account_id)
    return [_order_response(order) for order in orders_for(account_id)]


@library_router.get("/{account_id}/orders/{order_id}", response_model=OrderResponse)
async def get_order(account_id: str, order_id: str) -> OrderResponse:
    return _order_response(get_order_for(account_id, order_id))


@library_router.get("/{account_id}/orders/{order_id}/downloads", response_model=list[DownloadResponse])
async def get_order_downloads(account_id: str, order_id: str) -> list[DownloadResponse]:
    return [_download_response(d) for d in order_downloads(account_id, order_id)]


@library_router.get("/{account_id}/library/tracks", response_model=list[ReleaseSummary])
async def list_purchased_tracks(account_id: str) -> list[ReleaseSummary]:
    return [_release_summary(track) for track in purchased_tracks(account_id)]


@library_router.get("/{account_id}/library/albums", response_model=list[ReleaseSummary])
async def list_purchased_albums(account_id: str) -> list[ReleaseSummary]:
    return [_release_summary(album) for album in purchased_albums(account_id)]


@library_router.get("/{account_id}/library/tracks/{track_id}/download", response_model=DownloadResponse)
async def download_track(account_id: str, track_id: str) -> DownloadResponse:
    return _download_response(track_download(account_id, track_id))


@library_router.get("/{account_id}/library/albums/{album_id}/download", response_model=list[DownloadResponse])
async def download_album(account_id: str, album_id: str) -> list[DownloadResponse]:
    return [_download_response(d) for d in album_downloads(account_id, album_id)]
