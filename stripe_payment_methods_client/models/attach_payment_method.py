from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define

T = TypeVar("T", bound="AttachPaymentMethod")


@_attrs_define
class AttachPaymentMethod:
    """The parameters for attaching a payment method to a customer.

    Attributes:
        customer (str): The ID of the customer to which to attach the PaymentMethod. Example: cus_NffrFeUfNV2Hib.
    """

    customer: str

    def to_dict(self) -> dict[str, Any]:
        customer = self.customer

        field_dict: dict[str, Any] = {}
        field_dict.update(
            {
                "customer": customer,
            }
        )

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        customer = d.pop("customer")

        attach_payment_method = cls(
            customer=customer,
        )

        return attach_payment_method
