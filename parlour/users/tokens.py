from __future__ import annotations

from typing import TYPE_CHECKING

from rest_framework_simplejwt.tokens import RefreshToken

if TYPE_CHECKING:  # import for type checking only
    from parlour.users.models import User


def issue_tokens(user: User) -> dict[str, str]:
    """Return a refresh/access pair whose claims carry the user's role and name."""

    refresh = RefreshToken.for_user(user)
    refresh["role"] = str(user.effective_role)
    refresh["name"] = user.name
    return {"access": str(refresh.access_token), "refresh": str(refresh)}
