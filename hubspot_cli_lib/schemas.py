from dataclasses import dataclass
from typing import Callable, Literal

from pydantic import BaseModel, ConfigDict

ContentFilter = Callable[[str, str], bool]


class ContentEntry(BaseModel):
    model_config = ConfigDict(extra='ignore')

    path: str
    type: Literal['file', 'dir', 'symlink', 'submodule']
    download_url: str | None = None
    name: str | None = None
    sha: str | None = None
    size: int | None = None
    url: str | None = None


class ReleaseData(BaseModel):
    model_config = ConfigDict(extra='allow')

    name: str | None = None
    tag_name: str | None = None
    zipball_url: str


@dataclass(frozen=True)
class MirrorRequest:
    """Everything one mirror operation needs, resolved up front by the caller."""

    repository: str
    source_path: str
    destination_path: str
    ref: str | None = None
    filter: ContentFilter | None = None
    token: str | None = None
