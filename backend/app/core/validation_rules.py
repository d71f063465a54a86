"""Validation Rules — pure field checks that reject malformed input with one reason.

Invariants:
    - Strings are trimmed before length/charset checks; email is also lowercased
    - Checks run in a fixed order and fail fast: exactly one BadRequestError per call
    - No IO, no side effects; uniqueness is checked later by services
    - Every limit comes from FieldLimits, never from literals in the checks

Design Decisions:
    - One frozen FieldLimits table: historical variants disagreed on limits
      (password minimum 6 vs 8), so the canonical values are configuration
    - validate_* helpers return the normalized value so callers cannot
      accidentally persist the untrimmed input
    - Composite validators return frozen dataclasses (Validated*) consumed by
      services and the entity mapper
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from app.core.domain_types import CategoryId, CategoryLabel, LoginIdentifier
from app.core.errors import BadRequestError


@dataclass(frozen=True)
class FieldLimits:
    """Named constraints for every validated field."""
    username_min: int = 3
    username_max: int = 50
    username_pattern: str = r"^[a-zA-Z0-9._-]+$"
    password_min: int = 6
    password_max: int = 100
    email_pattern: str = r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$"
    email_max: int = 255
    full_name_max: int = 100
    product_name_min: int = 3
    product_name_max: int = 100
    description_max: int = 500
    price_max: Decimal = Decimal("999999999")
    price_scale: int = 2
    quantity_min: int = 0
    quantity_max: int = 99_999
    category_name_min: int = 2
    category_name_max: int = 50
    category_description_max: int = 255


LIMITS = FieldLimits()

_LETTER = re.compile(r"[A-Za-z]")
_DIGIT = re.compile(r"[0-9]")


# ─── Validated shapes ────────────────────────────────────────────

@dataclass(frozen=True)
class ValidatedRegistration:
    username: str | None
    email: str
    password: str
    full_name: str


@dataclass(frozen=True)
class LoginCredentials:
    identifier_type: LoginIdentifier
    identifier: str
    password: str


@dataclass(frozen=True)
class ValidatedProduct:
    name: str
    description: str | None
    price: Decimal
    quantity: int
    category_id: CategoryId | None
    category_name: str | None


@dataclass(frozen=True)
class ValidatedCategory:
    name: str
    description: str | None


# ─── Helpers ─────────────────────────────────────────────────────

def _trimmed(raw: str | None) -> str:
    return raw.strip() if raw is not None else ""


def _optional_trimmed(raw: str | None) -> str | None:
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def invalid_category_message(raw: str) -> str:
    return (
        f"Invalid category: {raw}. "
        f"Valid categories are: {CategoryLabel.valid_labels()}"
    )


# ─── Field rules ─────────────────────────────────────────────────

def validate_username(raw: str | None, limits: FieldLimits = LIMITS) -> str:
    username = _trimmed(raw)
    if not username:
        raise BadRequestError("Username is required", "username")
    if len(username) < limits.username_min:
        raise BadRequestError(
            f"Username must be at least {limits.username_min} characters",
            "username",
        )
    if len(username) > limits.username_max:
        raise BadRequestError(
            f"Username must not exceed {limits.username_max} characters",
            "username",
        )
    if not re.match(limits.username_pattern, username):
        raise BadRequestError(
            "Username can only contain letters, numbers, dots, hyphens, "
            "and underscores",
            "username",
        )
    return username


def validate_email(raw: str | None, limits: FieldLimits = LIMITS) -> str:
    email = _trimmed(raw).lower()
    if not email:
        raise BadRequestError("Email is required", "email")
    if len(email) > limits.email_max or not re.match(limits.email_pattern, email):
        raise BadRequestError("Invalid email format", "email")
    return email


def validate_password(raw: str | None, limits: FieldLimits = LIMITS) -> str:
    """Strength rules apply at registration only. The password is never trimmed."""
    if not raw:
        raise BadRequestError("Password is required", "password")
    if len(raw) < limits.password_min:
        raise BadRequestError(
            f"Password must be at least {limits.password_min} characters",
            "password",
        )
    if len(raw) > limits.password_max:
        raise BadRequestError(
            f"Password must not exceed {limits.password_max} characters",
            "password",
        )
    if not _LETTER.search(raw):
        raise BadRequestError(
            "Password must contain at least one letter", "password",
        )
    if not _DIGIT.search(raw):
        raise BadRequestError(
            "Password must contain at least one number", "password",
        )
    return raw


def validate_full_name(raw: str | None, limits: FieldLimits = LIMITS) -> str:
    full_name = _trimmed(raw)
    if not full_name:
        raise BadRequestError("Full name is required", "fullName")
    if len(full_name) > limits.full_name_max:
        raise BadRequestError(
            f"Full name must not exceed {limits.full_name_max} characters",
            "fullName",
        )
    return full_name


def validate_product_name(raw: str | None, limits: FieldLimits = LIMITS) -> str:
    name = _trimmed(raw)
    if not name:
        raise BadRequestError("Product name is required", "name")
    if not limits.product_name_min <= len(name) <= limits.product_name_max:
        raise BadRequestError(
            f"Product name must be between {limits.product_name_min} "
            f"and {limits.product_name_max} characters",
            "name",
        )
    return name


def validate_description(
    raw: str | None, limits: FieldLimits = LIMITS,
) -> str | None:
    description = _optional_trimmed(raw)
    if description is not None and len(description) > limits.description_max:
        raise BadRequestError(
            f"Description must not exceed {limits.description_max} characters",
            "description",
        )
    return description


def validate_price(raw: object, limits: FieldLimits = LIMITS) -> Decimal:
    if raw is None:
        raise BadRequestError("Price is required", "price")
    if isinstance(raw, bool):
        raise BadRequestError("Price must be a valid number", "price")
    try:
        price = raw if isinstance(raw, Decimal) else Decimal(str(raw))
    except (InvalidOperation, ValueError):
        raise BadRequestError("Price must be a valid number", "price")
    if not price.is_finite():
        raise BadRequestError("Price must be a valid number", "price")
    if price <= 0:
        raise BadRequestError("Price must be greater than 0", "price")
    if price > limits.price_max:
        raise BadRequestError(
            f"Price must not exceed {limits.price_max:,}", "price",
        )
    if -price.as_tuple().exponent > limits.price_scale:
        raise BadRequestError(
            f"Price must have at most {limits.price_scale} decimal places",
            "price",
        )
    return price


def validate_quantity(raw: object, limits: FieldLimits = LIMITS) -> int:
    if raw is None:
        raise BadRequestError("Quantity is required", "quantity")
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise BadRequestError("Quantity must be an integer", "quantity")
    if raw < limits.quantity_min:
        raise BadRequestError(
            f"Quantity must be greater than or equal to {limits.quantity_min}",
            "quantity",
        )
    if raw > limits.quantity_max:
        raise BadRequestError(
            f"Quantity must not exceed {limits.quantity_max:,}", "quantity",
        )
    return raw


def validate_category_reference(
    category: str | None, category_id: int | None,
) -> tuple[CategoryId | None, str | None]:
    """Require a category by id or by name. Existence is checked by the service."""
    if category_id is not None:
        return CategoryId(category_id), None
    name = _trimmed(category)
    if not name:
        raise BadRequestError("Category is required", "category")
    return None, name


def validate_category_name(raw: str | None, limits: FieldLimits = LIMITS) -> str:
    name = _trimmed(raw)
    if not name:
        raise BadRequestError("Category name is required", "name")
    if not limits.category_name_min <= len(name) <= limits.category_name_max:
        raise BadRequestError(
            f"Category name must be between {limits.category_name_min} "
            f"and {limits.category_name_max} characters",
            "name",
        )
    return name


def validate_category_description(
    raw: str | None, limits: FieldLimits = LIMITS,
) -> str | None:
    description = _optional_trimmed(raw)
    if (
        description is not None
        and len(description) > limits.category_description_max
    ):
        raise BadRequestError(
            "Category description must not exceed "
            f"{limits.category_description_max} characters",
            "description",
        )
    return description


# ─── Composite validators ────────────────────────────────────────

def validate_registration(
    *,
    username: str | None,
    email: str | None,
    password: str | None,
    full_name: str | None,
    limits: FieldLimits = LIMITS,
) -> ValidatedRegistration:
    """Order: username, email, password, full name.

    Username is optional: a blank or missing value registers an email-only
    account, anything else must pass the username rules.
    """
    return ValidatedRegistration(
        username=validate_username(username, limits) if _trimmed(username) else None,
        email=validate_email(email, limits),
        password=validate_password(password, limits),
        full_name=validate_full_name(full_name, limits),
    )


def validate_login(
    *, email: str | None, username: str | None, password: str | None,
) -> LoginCredentials:
    """Presence checks only; strength rules are not re-applied at login."""
    email_value = _trimmed(email).lower()
    username_value = _trimmed(username)
    if email_value:
        identifier_type, identifier = LoginIdentifier.EMAIL, email_value
    elif username_value:
        identifier_type, identifier = LoginIdentifier.USERNAME, username_value
    else:
        raise BadRequestError("Email is required", "email")
    if not password:
        raise BadRequestError("Password is required", "password")
    return LoginCredentials(identifier_type, identifier, password)


def validate_product(
    *,
    name: str | None,
    description: str | None,
    price: object,
    quantity: object,
    category: str | None,
    category_id: int | None,
    limits: FieldLimits = LIMITS,
) -> ValidatedProduct:
    """Order: name, description, price, quantity, category."""
    valid_name = validate_product_name(name, limits)
    valid_description = validate_description(description, limits)
    valid_price = validate_price(price, limits)
    valid_quantity = validate_quantity(quantity, limits)
    ref_id, ref_name = validate_category_reference(category, category_id)
    return ValidatedProduct(
        name=valid_name,
        description=valid_description,
        price=valid_price,
        quantity=valid_quantity,
        category_id=ref_id,
        category_name=ref_name,
    )


def validate_category(
    *, name: str | None, description: str | None, limits: FieldLimits = LIMITS,
) -> ValidatedCategory:
    return ValidatedCategory(
        name=validate_category_name(name, limits),
        description=validate_category_description(description, limits),
    )
