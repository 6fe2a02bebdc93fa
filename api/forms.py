"""
HTML form validation.

Each validator returns human-readable messages for the page instead of
raising, so the form can be shown again with the submitted values.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import BaseModel, EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from modules.payments.models import Currency, PaymentLinkRequest

_email_adapter = TypeAdapter(EmailStr)

MIN_AMOUNT = Decimal("0.50")
MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MIN_QUANTITY = 1
MAX_QUANTITY = 1000


class LoginForm(BaseModel):
    """Submitted login form."""

    email: str = ""
    password: str = ""

    def validate_fields(self) -> list[str]:
        errors = []
        try:
            _email_adapter.validate_python(self.email)
        except PydanticValidationError:
            errors.append("Please enter a valid email address")
        if len(self.password) < 1:
            errors.append("Password is required")
        return errors


class PaymentLinkForm(BaseModel):
    """Submitted payment link form, as raw strings."""

    name: str = ""
    description: str = ""
    amount: str = ""
    currency: str = ""
    quantity: str = ""

    def validate_fields(self) -> tuple[Optional[PaymentLinkRequest], list[str]]:
        """
        Validate the form.

        Returns:
            (request, []) when valid, (None, messages) otherwise
        """
        errors = []

        name = self.name.strip()
        if not 1 <= len(name) <= MAX_NAME_LENGTH:
            errors.append("Product name is required and must be less than 100 characters")

        description = self.description.strip()
        if len(description) > MAX_DESCRIPTION_LENGTH:
            errors.append("Description must be less than 500 characters")

        amount = _parse_amount(self.amount)
        if amount is None or amount < MIN_AMOUNT:
            errors.append("Amount must be at least $0.50")

        currency = Currency.USD
        if self.currency.strip():
            try:
                currency = Currency(self.currency.strip().lower())
            except ValueError:
                errors.append("Invalid currency")

        quantity = MIN_QUANTITY
        if self.quantity.strip():
            parsed = _parse_int(self.quantity)
            if parsed is None or not MIN_QUANTITY <= parsed <= MAX_QUANTITY:
                errors.append("Quantity must be between 1 and 1000")
            else:
                quantity = parsed

        if errors:
            return None, errors

        request = PaymentLinkRequest(
            name=name,
            description=description or None,
            amount=amount,
            currency=currency,
            quantity=quantity,
        )
        return request, []


def _parse_amount(value: str) -> Optional[Decimal]:
    try:
        amount = Decimal(value.strip())
    except InvalidOperation:
        return None
    if not amount.is_finite():
        return None
    return amount


def _parse_int(value: str) -> Optional[int]:
    try:
        return int(value.strip())
    except ValueError:
        return None
