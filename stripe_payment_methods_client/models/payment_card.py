from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

T = TypeVar("T", bound="PaymentCard")


@_attrs_define
class PaymentCard:
    """Raw card data sent when creating or updating a card payment method.

    Values are passed to the API as given, without local validation. ``number`` and ``cvc`` are left out of
    ``repr()``.

    Attributes:
        exp_year (int): Four-digit expiry year. Example: 2034.
        exp_month (int): Expiry month, 1 to 12. Example: 12.
        number (str): The card number, as a string without separators. Example: 4242424242424242.
        cvc (int): Card security code. Example: 314.
    """

    exp_year: int
    exp_month: int
    number: str = _attrs_field(repr=False)
    cvc: int = _attrs_field(repr=False)

    def to_dict(self) -> dict[str, Any]:
        exp_year = self.exp_year

        exp_month = self.exp_month

        number = self.number

        cvc = self.cvc

        field_dict: dict[str, Any] = {}
        field_dict.update(
            {
                "exp_year": exp_year,
                "exp_month": exp_month,
                "number": number,
                "cvc": cvc,
            }
        )

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        exp_year = d.pop("exp_year")

        exp_month = d.pop("exp_month")

        number = d.pop("number")

        cvc = d.pop("cvc")

        payment_card = cls(
            exp_year=exp_year,
            exp_month=exp_month,
            number=number,
            cvc=cvc,
        )

        return payment_card
