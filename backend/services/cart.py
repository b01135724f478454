# backend/services/cart.py
# Cart operations that need live inventory. Each cart change runs inside one
# CartRepository.edit call and each stock change inside one DiscRepository.take
# call. A purchase takes stock while holding the cart lock, always in that order,
# so a failure half way through can still leave the two files out of step.
import logging
from typing import List, Optional

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

logger = logging.getLogger(__name__)


class CartService:

    @staticmethod
    def get_cart(carts: CartRepository, username: str) -> Cart:
        cart = carts.find_cart(username)
        if cart is None:
            raise CartNotFoundException(username)
        return cart

    @staticmethod
    def add_disc(carts: CartRepository, username: str, disc_id: int, quantity: int = 1) -> Optional[Cart]:
        return carts.edit(username, lambda cart: cart.add_disc(disc_id, quantity))

    @staticmethod
    def remove_disc(carts: CartRepository, username: str, disc_id: int) -> Optional[Cart]:
        return carts.edit(username, lambda cart: cart.remove_disc(disc_id))

    @staticmethod
    def update_disc_quantity(carts: CartRepository, username: str, disc_id: int,
                             amount: int, mode: int) -> Optional[Cart]:
        return carts.edit(username, lambda cart: cart.update_disc_quantity(disc_id, amount, mode))

    @staticmethod
    def get_contents(carts: CartRepository, discs: DiscRepository, username: str) -> List[Disc]:
        """Discs of the cart still in inventory, carrying the cart quantity."""
        cart = CartService.get_cart(carts, username)
        result = []
        for disc_id, quantity in sorted(cart.contents.items()):
            disc = discs.get(disc_id)
            if disc is not None:
                result.append(disc.with_quantity(quantity))
        return result

    @staticmethod
    def get_cost(carts: CartRepository, discs: DiscRepository, username: str) -> float:
        cart = CartService.get_cart(carts, username)
        cost = 0.0
        for disc_id, quantity in cart.contents.items():
            disc = discs.get(disc_id)
            if disc is not None:  # discs gone from inventory cost nothing
                cost += disc.price * quantity
        return cost

    @staticmethod
    def get_count(carts: CartRepository, username: str) -> int:
        return CartService.get_cart(carts, username).count()

    @staticmethod
    def check_cart(carts: CartRepository, discs: DiscRepository, username: str) -> List[Disc]:
        """
        Discs whose inventory cannot cover the cart quantity.

        Each conflict carries the quantity available in inventory, not the one
        requested. An empty cart counts as not found.
        """
        cart = CartService.get_cart(carts, username)
        contents = cart.contents
        if not contents:
            raise CartNotFoundException(username)

        conflicts = []
        for disc_id, wanted in sorted(contents.items()):
            disc = discs.get(disc_id)
            if disc is not None and disc.quantity < wanted:
                conflicts.append(disc.with_quantity(disc.quantity))
        return conflicts

    @staticmethod
    def check_one_disc(carts: CartRepository, discs: DiscRepository, username: str, disc_id: int) -> Optional[Disc]:
        """The disc with its available quantity if it cannot cover the cart, else None."""
        cart = CartService.get_cart(carts, username)
        disc = discs.get(disc_id)
        if disc is None:
            raise DiscUnavailableException(disc_id)

        if disc.quantity < cart.get_quantity(disc_id):
            return disc.with_quantity(disc.quantity)
        return None

    @staticmethod
    def purchase_cart(carts: CartRepository, discs: DiscRepository, username: str) -> List[Disc]:
        """
        Buy every disc in the cart, as much as inventory allows.

        Returns the purchase lines. Discs missing from inventory are skipped and stay
        in the cart; when that is true of every disc the purchase is a conflict.
        """
        purchases = []
        unpurchasable = []

        def purchase(cart: Cart) -> bool:
            contents = cart.contents
            if not contents:
                raise CartNotFoundException(username)
            for disc_id, wanted in sorted(contents.items()):
                line = discs.take(disc_id, wanted)
                if line is None:
                    unpurchasable.append(disc_id)
                    continue
                purchases.append(line)
                cart.remove_disc(disc_id)
            return True

        carts.edit(username, purchase)

        if not purchases:
            raise NothingPurchasableException(username, unpurchasable)
        if unpurchasable:
            logger.info("Cart of %s purchased without unavailable discs %s", username, unpurchasable)
        return purchases

    @staticmethod
    def purchase_one_disc(carts: CartRepository, discs: DiscRepository, username: str, disc_id: int) -> Disc:
        """Buy one disc of the cart; returns it with the quantity purchased."""
        purchased = []

        def purchase(cart: Cart) -> bool:
            wanted = cart.get_quantity(disc_id)
            if wanted == 0:
                if discs.get(disc_id) is None:
                    raise DiscUnavailableException(disc_id)
                raise DiscNotInCartException(username, disc_id)

            line = discs.take(disc_id, wanted)
            if line is None:
                raise DiscUnavailableException(disc_id)
            purchased.append(line)
            cart.remove_disc(disc_id)
            return True

        carts.edit(username, purchase)
        return purchased[0]
