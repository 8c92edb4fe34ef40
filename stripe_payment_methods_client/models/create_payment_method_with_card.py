from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import evolve

from ..models.create_payment_method import CreatePaymentMethod
from ..models.payment_card import PaymentCard
from ..models.payment_method_type_filter import PaymentMethodTypeFilter

T = TypeVar("T", bound="CreatePaymentMethodWithCard")

CARD_FIELDS = ("exp_year", "exp_month", "number", "cvc")


@_attrs_define
class CreatePaymentMethodWithCard:
    """The generic creation parameters together with raw card data.

    Both serialize into one flat object: the card fields are siblings of the generic fields, not nested under a
    ``card`` key.

    Attributes:
        create_payment_method (CreatePaymentMethod):
        card (PaymentCard):
    """

    create_payment_method: CreatePaymentMethod
    card: PaymentCard

    def with_card_type(self: T) -> T:
        """Return a copy whose type discriminator is ``card``, whatever it was before. ``self`` is left untouched."""
        return evolve(
            self,
            create_payment_method=evolve(self.create_payment_method, type_=PaymentMethodTypeFilter.CARD),
        )

    def to_dict(self) -> dict[str, Any]:
        create_payment_method = self.create_payment_method.to_dict()

        card = self.card.to_dict()

        field_dict: dict[str, Any] = {}
        field_dict.update(create_payment_method)
        field_dict.update(card)

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        card = PaymentCard.from_dict({key: d.pop(key) for key in CARD_FIELDS})

        create_payment_method = CreatePaymentMethod.from_dict(d)

        create_payment_method_with_card = cls(
            create_payment_method=create_payment_method,
            card=card,
        )

        return create_payment_method_with_card
