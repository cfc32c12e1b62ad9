"""Payment request types (W3C Payment Request shapes as carried by activities).

Payment requests travel as a card attachment whose button has the
``payment`` action type; the channel answers with ``payments/*`` invoke
activities (see :class:`~botschema.models.constants.PaymentOperations`).
"""

from __future__ import annotations

from typing import Any, ClassVar

from ._base import SchemaModel

MICROSOFT_PAY_METHOD_NAME = "https://pay.microsoft.com/microsoftpay"


class PaymentAddress(SchemaModel):
    country: str | None = None
    address_line: list[str] | None = None
    region: str | None = None
    city: str | None = None
    dependent_locality: str | None = None
    postal_code: str | None = None
    sorting_code: str | None = None
    language_code: str | None = None
    organization: str | None = None
    recipient: str | None = None
    phone: str | None = None


class PaymentCurrencyAmount(SchemaModel):
    currency: str | None = None
    value: str | None = None
    currency_system: str | None = None


class PaymentItem(SchemaModel):
    label: str | None = None
    amount: PaymentCurrencyAmount | None = None
    pending: bool | None = None


class PaymentShippingOption(SchemaModel):
    id: str | None = None
    label: str | None = None
    amount: PaymentCurrencyAmount | None = None
    selected: bool | None = None


class PaymentDetailsModifier(SchemaModel):
    """Price adjustments that apply only for the listed payment methods."""

    supported_methods: list[str] | None = None
    total: PaymentItem | None = None
    additional_display_items: list[PaymentItem] | None = None
    data: Any = None


class PaymentDetails(SchemaModel):
    total: PaymentItem | None = None
    display_items: list[PaymentItem] | None = None
    shipping_options: list[PaymentShippingOption] | None = None
    modifiers: list[PaymentDetailsModifier] | None = None
    error: str | None = None


class PaymentMethodData(SchemaModel):
    supported_methods: list[str] | None = None
    data: Any = None


class PaymentOptions(SchemaModel):
    request_payer_name: bool | None = None
    request_payer_email: bool | None = None
    request_payer_phone: bool | None = None
    request_shipping: bool | None = None
    shipping_type: str | None = None


class PaymentRequest(SchemaModel):
    payment_action_type: ClassVar[str] = "payment"

    id: str | None = None
    method_data: list[PaymentMethodData] | None = None
    details: PaymentDetails | None = None
    options: PaymentOptions | None = None
    expires: str | None = None


class PaymentResponse(SchemaModel):
    method_name: str | None = None
    details: Any = None
    shipping_address: PaymentAddress | None = None
    shipping_option: str | None = None
    payer_email: str | None = None
    payer_phone: str | None = None


class PaymentRequestComplete(SchemaModel):
    """Value of a ``payments/complete`` invoke."""

    id: str | None = None
    payment_request: PaymentRequest | None = None
    payment_response: PaymentResponse | None = None


class PaymentRequestCompleteResult(SchemaModel):
    result: str | None = None


class PaymentRequestUpdate(SchemaModel):
    """Value of a ``payments/update/*`` invoke."""

    id: str | None = None
    details: PaymentDetails | None = None
    shipping_address: PaymentAddress | None = None
    shipping_option: str | None = None


class PaymentRequestUpdateResult(SchemaModel):
    details: PaymentDetails | None = None


class MicrosoftPayMethodData(SchemaModel):
    merchant_id: str | None = None
    supported_networks: list[str] | None = None
    supported_types: list[str] | None = None

    def to_payment_method_data(self) -> PaymentMethodData:
        return PaymentMethodData(
            supported_methods=[MICROSOFT_PAY_METHOD_NAME],
            data=self.serialize(),
        )
