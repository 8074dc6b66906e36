"""Shared string field types for request schemas.

Incoming text is trimmed before length checks, so a value made only of
whitespace fails ``min_length`` the same way an empty string does. Passwords
are never trimmed.
"""

from typing import Annotated

from pydantic import StringConstraints

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
TextStr = Annotated[str, StringConstraints(strip_whitespace=True)]
LocationStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)]
PhoneStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=20)]
