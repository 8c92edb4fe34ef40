from collections.abc import Mapping
from typing import Any, TypeVar, Union, cast

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset

T = TypeVar("T", bound="ApiErrorDetail")


@_attrs_define
class ApiErrorDetail:
    """The ``error`` object of an API error response.

    Attributes:
        type_ (Union[Unset, str]): The type of error returned. Example: card_error.
        code (Union[None, Unset, str]): A short string indicating the error code reported. Example: card_declined.
        decline_code (Union[None, Unset, str]): For card errors resulting from a card issuer decline, the reason for
            the decline. Example: insufficient_funds.
        message (Union[None, Unset, str]): A human-readable message providing more details about the error.
        param (Union[None, Unset, str]): The parameter the error relates to, if any. Example: customer.
        doc_url (Union[None, Unset, str]): A URL to more information about the error code reported.
        request_log_url (Union[None, Unset, str]): A URL to the request log entry in the dashboard.
    """

    type_: Union[Unset, str] = UNSET
    code: Union[None, Unset, str] = UNSET
    decline_code: Union[None, Unset, str] = UNSET
    message: Union[None, Unset, str] = UNSET
    param: Union[None, Unset, str] = UNSET
    doc_url: Union[None, Unset, str] = UNSET
    request_log_url: Union[None, Unset, str] = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        type_ = self.type_

        code = self.code

        decline_code = self.decline_code

        message = self.message

        param = self.param

        doc_url = self.doc_url

        request_log_url = self.request_log_url

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update({})
        if type_ is not UNSET:
            field_dict["type"] = type_
        if code is not UNSET:
            field_dict["code"] = code
        if decline_code is not UNSET:
            field_dict["decline_code"] = decline_code
        if message is not UNSET:
            field_dict["message"] = message
        if param is not UNSET:
            field_dict["param"] = param
        if doc_url is not UNSET:
            field_dict["doc_url"] = doc_url
        if request_log_url is not UNSET:
            field_dict["request_log_url"] = request_log_url

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        type_ = cast(Union[Unset, str], d.pop("type", UNSET))

        code = cast(Union[None, Unset, str], d.pop("code", UNSET))

        decline_code = cast(Union[None, Unset, str], d.pop("decline_code", UNSET))

        message = cast(Union[None, Unset, str], d.pop("message", UNSET))

        param = cast(Union[None, Unset, str], d.pop("param", UNSET))

        doc_url = cast(Union[None, Unset, str], d.pop("doc_url", UNSET))

        request_log_url = cast(Union[None, Unset, str], d.pop("request_log_url", UNSET))

        api_error_detail = cls(
            type_=type_,
            code=code,
            decline_code=decline_code,
            message=message,
            param=param,
            doc_url=doc_url,
            request_log_url=request_log_url,
        )

        api_error_detail.additional_properties = d
        return api_error_detail

    @property
    def additional_keys(self) -> list[str]:
        return list(self.additional_properties.keys())

    def __getitem__(self, key: str) -> Any:
        return self.additional_properties[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.additional_properties[key] = value

    def __delitem__(self, key: str) -> None:
        del self.additional_properties[key]

    def __contains__(self, key: str) -> bool:
        return key in self.additional_properties
