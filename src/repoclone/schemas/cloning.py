"""Schema for a clone request."""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, SecretStr
from typing_extensions import Annotated


class UsernamePasswordCredential(BaseModel):
    """Basic-authentication credential embedded as ``username:password@`` in the clone URL."""

    kind: Literal["password"] = "password"
    username: str = Field(min_length=1)
    password: SecretStr


class TokenCredential(BaseModel):
    """Access-token credential embedded as ``token@`` in the clone URL."""

    kind: Literal["token"] = "token"
    token: SecretStr


Credential = Annotated[Union[UsernamePasswordCredential, TokenCredential], Field(discriminator="kind")]


class CloneRequest(BaseModel):
    """Parameters for cloning a Git repository.

    Attributes
    ----------
    url : str
        The URL of the Git repository to clone.
    local_path : str
        The local directory where the repository will be cloned.
    branch : str
        The branch to clone (default: ``""``, the remote's default branch).
    credential : UsernamePasswordCredential | TokenCredential | None
        Credentials to embed into ``url`` before cloning (default: ``None``).

    """

    url: str = Field(min_length=1)
    local_path: str = Field(min_length=1)
    branch: str = Field(default="")
    credential: Optional[Credential] = None
