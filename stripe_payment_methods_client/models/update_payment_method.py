from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, Union, cast

from attrs import define as _attrs_define

from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.billing_details import BillingDetails


T = TypeVar("T", bound="UpdatePaymentMethod")


@_attrs_define
class UpdatePaymentMethod:
    """The generic parameters for updating a payment method.

    Attributes:
        billing_details (Union[Unset, BillingDetails]):
        metadata (Union[None, Unset, dict[str, str]]): Set of key-value pairs that you can attach to an object.
            ``None`` clears all keys.
        expand (Union[Unset, list[str]]): Specifies which fields in the response should be expanded.
    """

    billing_details: Union[Unset, "BillingDetails"] = UNSET
    metadata: Union[None, Unset, dict[str, str]] = UNSET
    expand: Union[Unset, list[str]] = UNSET

    def to_dict(self) -> dict[str, Any]:
        billing_details: Union[Unset, dict[str, Any]] = UNSET
        if not isinstance(self.billing_details, Unset):
            billing_details = self.billing_details.to_dict()

        metadata: Union[None, Unset, dict[str, str]]
        if isinstance(self.metadata, Unset):
            metadata = UNSET
        elif isinstance(self.metadata, dict):
            metadata = dict(self.metadata)
        else:
            metadata = self.metadata

        expand: Union[Unset, list[str]] = UNSET
        if not isinstance(self.expand, Unset):
            expand = list(self.expand)

        field_dict: dict[str, Any] = {}
        field_dict.update({})
        if billing_details is not UNSET:
            field_dict["billing_details"] = billing_details
        if metadata is not UNSET:
            field_dict["metadata"] = metadata
        if expand is not UNSET:
            field_dict["expand"] = expand

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.billing_details import BillingDetails

        d = dict(src_dict)
        _billing_details = d.pop("billing_details", UNSET)
        billing_details: Union[Unset, BillingDetails]
        if isinstance(_billing_details, Unset):
            billing_details = UNSET
        else:
            billing_details = BillingDetails.from_dict(_billing_details)

        metadata = cast(Union[None, Unset, dict[str, str]], d.pop("metadata", UNSET))

        expand = cast(Union[Unset, list[str]], d.pop("expand", UNSET))

        update_payment_method = cls(
            billing_details=billing_details,
            metadata=metadata,
            expand=expand,
        )

        return update_payment_method
