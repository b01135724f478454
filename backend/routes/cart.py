# backend/routes/cart.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from database import get_cart_repo, get_disc_repo
from exceptions import (
    CartNotFoundException,
    DiscNotInCartException,
    DiscUnavailableException,
    NothingPurchasableException,
)
from models.cart import Cart
from models.disc import Disc
from repositories.cart import CartRepository
from repositories.disc import DiscRepository
from services.cart import CartService
from utils.audit import client_ip, write_log
from schemas.cart import CartCreate, CartUpdate, CartResponse
from schemas.disc import DiscResponse

router = APIRouter(prefix="/carts", tags=["Cart"])


def _discs_out(discs: List[Disc]) -> List[DiscResponse]:
    return [DiscResponse.model_validate(d) for d in discs]

def _changed_cart(cart, request: Request, username: str, action: str, meta: dict) -> CartResponse:
    # A missing cart or a refused cart operation both answer 404
    if cart is None:
        write_log(username=username, action=action, resource="cart", status="FAIL",
                  ip=client_ip(request), meta=meta)
        raise HTTPException(status_code=404, detail="Cart not updated")
    write_log(username=username, action=action, resource="cart", ip=client_ip(request),
              meta={**meta, "cart_items": len(cart.contents)})
    return CartResponse.model_validate(cart)


# ==========================================
#  CRUD
# ==========================================
@router.get("", response_model=List[CartResponse])
def get_carts(carts: CartRepository = Depends(get_cart_repo)):
    return [CartResponse.model_validate(c) for c in carts.get_all()]


# Carts owned by exactly the given username
@router.get("/", response_model=List[CartResponse])
def search_carts(username: str = Query(...), carts: CartRepository = Depends(get_cart_repo)):
    return [CartResponse.model_validate(c) for c in carts.find_carts(username)]


@router.get("/{cart_id}", response_model=CartResponse)
def get_cart(cart_id: int, carts: CartRepository = Depends(get_cart_repo)):
    cart = carts.get(cart_id)
    if cart is None:
        raise HTTPException(status_code=404, detail="Cart not found")
    return CartResponse.model_validate(cart)


@router.post("", response_model=CartResponse, status_code=status.HTTP_201_CREATED)
def create_cart(payload: CartCreate, request: Request, carts: CartRepository = Depends(get_cart_repo)):
    new_cart = carts.create(payload.username, payload.contents)
    if new_cart is None:
        write_log(username=payload.username, action="CART_CREATE", resource="cart", status="FAIL",
                  ip=client_ip(request), meta={"reason": "Username already has a cart"})
        raise HTTPException(status_code=409, detail="Cart already exists")

    write_log(username=payload.username, action="CART_CREATE", resource="cart",
              ip=client_ip(request), meta={"cart_id": new_cart.id})
    return CartResponse.model_validate(new_cart)


@router.put("", response_model=CartResponse)
def update_cart(payload: CartUpdate, request: Request, carts: CartRepository = Depends(get_cart_repo)):
    updated = carts.update(Cart(payload.id, payload.username, payload.contents))
    if updated is None:
        raise HTTPException(status_code=404, detail="Cart not found")

    write_log(username=updated.username, action="CART_UPDATE", resource="cart",
              ip=client_ip(request), meta={"cart_id": updated.id, "cart_items": len(updated.contents)})
    return CartResponse.model_validate(updated)


@router.delete("/{cart_id}")
def delete_cart(cart_id: int, request: Request, carts: CartRepository = Depends(get_cart_repo)):
    if not carts.delete(cart_id):
        raise HTTPException(status_code=404, detail="Cart not found")

    write_log(username=None, action="CART_DELETE", resource="cart", ip=client_ip(request),
              meta={"cart_id": cart_id})
    return Response(status_code=status.HTTP_200_OK)


# ==========================================
#  CART CONTENTS
# ==========================================
# Discs in the cart that are still stocked, with the cart quantity
@router.get("/{username}/contents", response_model=List[DiscResponse])
def get_contents(
    username: str,
    carts: CartRepository = Depends(get_cart_repo),
    discs: DiscRepository = Depends(get_disc_repo),
):
    try:
        return _discs_out(CartService.get_contents(carts, discs, username))
    except CartNotFoundException:
        raise HTTPException(status_code=404, detail="Cart not found")


@router.put("/addDisc/{username}/{disc_id}", response_model=CartResponse)
def add_to_cart(username: str, disc_id: int, request: Request, carts: CartRepository = Depends(get_cart_repo)):
    try:
        cart = CartService.add_disc(carts, username, disc_id)
    except CartNotFoundException:
        cart = None
    return _changed_cart(cart, request, username, "CART_ADD", {"disc_id": disc_id})


@router.put("/removeDisc/{username}/{disc_id}", response_model=CartResponse)
def remove_from_cart(username: str, disc_id: int, request: Request, carts: CartRepository = Depends(get_cart_repo)):
    try:
        cart = CartService.remove_disc(carts, username, disc_id)
    except CartNotFoundException:
        cart = None
    return _changed_cart(cart, request, username, "CART_REMOVE", {"disc_id": disc_id})


# mode: 0 set, 1 add, 2 subtract
@router.put("/updateDiscQuantity/{username}/{disc_id}/{amount}/{mode}", response_model=CartResponse)
def update_quantity_in_cart(
    username: str,
    disc_id: int,
    amount: int,
    mode: int,
    request: Request,
    carts: CartRepository = Depends(get_cart_repo),
):
    try:
        cart = CartService.update_disc_quantity(carts, username, disc_id, amount, mode)
    except CartNotFoundException:
        cart = None
    return _changed_cart(cart, request, username, "CART_QUANTITY",
                         {"disc_id": disc_id, "amount": amount, "mode": mode})


@router.get("/getCost/{username}", response_model=float)
def get_cost(
    username: str,
    carts: CartRepository = Depends(get_cart_repo),
    discs: DiscRepository = Depends(get_disc_repo),
):
    try:
        return CartService.get_cost(carts, discs, username)
    except CartNotFoundException:
        raise HTTPException(status_code=404, detail="Cart not found")


@router.get("/getCount/{username}", response_model=int)
def get_count(username: str, carts: CartRepository = Depends(get_cart_repo)):
    try:
        return CartService.get_count(carts, username)
    except CartNotFoundException:
        raise HTTPException(status_code=404, detail="Cart not found")


# ==========================================
#  CHECKOUT
# ==========================================
# Discs whose stock cannot cover the cart, with the stock quantity
@router.get("/checkCart/{username}", response_model=List[DiscResponse])
def check_cart(
    username: str,
    carts: CartRepository = Depends(get_cart_repo),
    discs: DiscRepository = Depends(get_disc_repo),
):
    try:
        return _discs_out(CartService.check_cart(carts, discs, username))
    except CartNotFoundException:
        raise HTTPException(status_code=404, detail="Cart not found")


@router.put("/purchase/{username}", response_model=List[DiscResponse])
def purchase_cart(
    username: str,
    request: Request,
    carts: CartRepository = Depends(get_cart_repo),
    discs: DiscRepository = Depends(get_disc_repo),
):
    try:
        purchases = CartService.purchase_cart(carts, discs, username)
    except CartNotFoundException:
        raise HTTPException(status_code=404, detail="Cart not found")
    except NothingPurchasableException as e:
        write_log(username=username, action="CART_PURCHASE", resource="cart", status="FAIL",
                  ip=client_ip(request), meta=e.details)
        raise HTTPException(status_code=409, detail="Nothing in the cart is available")

    write_log(
        username=username,
        action="CART_PURCHASE",
        resource="cart",
        ip=client_ip(request),
        meta={"purchased": {d.id: d.quantity for d in purchases}},
    )
    return _discs_out(purchases)


@router.get("/checkOne/{username}/{disc_id}", response_model=DiscResponse)
def check_one_disc(
    username: str,
    disc_id: int,
    carts: CartRepository = Depends(get_cart_repo),
    discs: DiscRepository = Depends(get_disc_repo),
):
    try:
        conflict = CartService.check_one_disc(carts, discs, username, disc_id)
    except CartNotFoundException:
        raise HTTPException(status_code=404, detail="Cart not found")
    except DiscUnavailableException:
        raise HTTPException(status_code=409, detail="Disc not in inventory")

    if conflict is None:
        # No conflict: success without a body
        return Response(status_code=status.HTTP_200_OK)
    return DiscResponse.model_validate(conflict)


@router.put("/purchaseOne/{username}/{disc_id}", response_model=DiscResponse)
def purchase_one_disc(
    username: str,
    disc_id: int,
    request: Request,
    carts: CartRepository = Depends(get_cart_repo),
    discs: DiscRepository = Depends(get_disc_repo),
):
    try:
        purchased = CartService.purchase_one_disc(carts, discs, username, disc_id)
    except (CartNotFoundException, DiscNotInCartException):
        raise HTTPException(status_code=404, detail="Disc not in cart")
    except DiscUnavailableException:
        write_log(username=username, action="CART_PURCHASE_ONE", resource="cart", status="FAIL",
                  ip=client_ip(request), meta={"disc_id": disc_id, "reason": "Not in inventory"})
        raise HTTPException(status_code=409, detail="Disc not in inventory")

    write_log(username=username, action="CART_PURCHASE_ONE", resource="cart", ip=client_ip(request),
              meta={"disc_id": disc_id, "quantity": purchased.quantity})
    return DiscResponse.model_validate(purchased)
