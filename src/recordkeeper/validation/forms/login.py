"""Login form field checks (format only; credentials are not verified here)."""

from __future__ import annotations

from typing import List

from ..models import FieldSpec
from ..rules.contact import check_login_identifier
from ..rules.password import check_login_password
from . import FormOptions


def build_fields(options: FormOptions) -> List[FieldSpec]:
    return [
        FieldSpec("studentIdLogin", check_login_identifier),
        FieldSpec("passwordLogin", check_login_password),
    ]
