"""
Normalization of the current-user endpoint's response.

Depending on the backend version, GET /utilisateur/{email} returns the
user as a bare object, inside a {success, data} envelope, or as a JSON
string whose role carries the role's whole user list (a recursive
serialization that may be truncated). The last case is handled by
parsing the string and, if that fails, extracting the base fields.
"""

import json
import re
from typing import Any

from logistics_console.shared.envelope import to_model, unwrap_object
from logistics_console.shared.exceptions import MalformedResponseError

from .models import User

_EMAIL_RE = re.compile(r'"email"\s*:\s*"([^"]+)"')
_ROLE_ID_RE = re.compile(r'"id_role"\s*:\s*(\d+)')
_ROLE_NAME_RE = re.compile(r'"nom"\s*:\s*"([^"]+)"')


def _extract_base_fields(raw: str, endpoint: str) -> dict[str, Any]:
    email = _EMAIL_RE.search(raw)
    role_id = _ROLE_ID_RE.search(raw)
    role_name = _ROLE_NAME_RE.search(raw)
    if not (email and role_id and role_name):
        raise MalformedResponseError(endpoint, "could not extract user fields from text body")
    return {
        "email": email.group(1),
        "role": {"id_role": int(role_id.group(1)), "nom": role_name.group(1)},
    }


def parse_user_profile(payload: Any, endpoint: str) -> User:
    """
    Turn the current-user response into a User.

    Raises:
        MalformedResponseError: If the body holds no usable user or no role
    """
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError:
            payload = _extract_base_fields(payload, endpoint)

    data = unwrap_object(payload, endpoint)
    if not data.get("role"):
        raise MalformedResponseError(endpoint, "user role missing")
    return to_model(User, data, endpoint)
