from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define

from ..models.create_payment_method_with_card import CARD_FIELDS
from ..models.payment_card import PaymentCard
from ..models.update_payment_method import UpdatePaymentMethod

T = TypeVar("T", bound="UpdatePaymentMethodWithCard")


@_attrs_define
class UpdatePaymentMethodWithCard:
    """The generic update parameters together with raw card data, serialized as one flat object.

    Attributes:
        update_payment_method (UpdatePaymentMethod):
        card (PaymentCard):
    """

    update_payment_method: UpdatePaymentMethod
    card: PaymentCard

    def to_dict(self) -> dict[str, Any]:
        update_payment_method = self.update_payment_method.to_dict()

        card = self.card.to_dict()

        field_dict: dict[str, Any] = {}
        field_dict.update(update_payment_method)
        field_dict.update(card)

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        card = PaymentCard.from_dict({key: d.pop(key) for key in CARD_FIELDS})

        update_payment_method = UpdatePaymentMethod.from_dict(d)

        update_payment_method_with_card = cls(
            update_payment_method=update_payment_method,
            card=card,
        )

        return update_payment_method_with_card
