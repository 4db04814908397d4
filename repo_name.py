"""Random repository names of the form ``page-xxxxxx``."""

from __future__ import annotations

import base64
import re
import secrets


REPO_NAME_PREFIX = "page-"
SUFFIX_LENGTH = 6
REPO_NAME_PATTERN = re.compile(rf"^{REPO_NAME_PREFIX}[a-z0-9]{{{SUFFIX_LENGTH}}}$")


def generate_repo_name() -> str:
    encoded = base64.b64encode(secrets.token_bytes(32)).decode("ascii")
    suffix = encoded.translate(str.maketrans("", "", "=+/"))[:SUFFIX_LENGTH].lower()
    return f"{REPO_NAME_PREFIX}{suffix}"
