# 📄 File: app/modules/onboarding/domain/models/staged_upload.py
# 🧭 Purpose (Layman Explanation):
# Holds the pictures an owner picked during onboarding (avatar, cover photo, gallery) until they
# press "finish". Nothing is sent to cloud storage before then; the wizard just shows a preview.
#
# 🧪 Purpose (Technical Summary):
# Upload staging area with three slots. Each StagedFile is an owned resource with an opaque
# preview reference and its raw payload; it is released when replaced, removed, after a
# successful submission, or when its session is discarded.
#
# 🔗 Dependencies:
# dataclasses, typing, uuid
#
# 🔄 Connected Modules / Calls From:
# Session registry, submission service, onboarding upload endpoints

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional
from uuid import uuid4

PREVIEW_SCHEME = "staged://"


class UploadSlot(str, Enum):
    AVATAR = "avatar"
    COVER = "cover"
    GALLERY = "gallery"


@dataclass(eq=False)
class StagedFile:
    """A picked file waiting for submission."""
    filename: str
    content_type: str
    data: bytes
    preview_ref: str = field(default_factory=lambda: f"{PREVIEW_SCHEME}{uuid4().hex}")
    released: bool = False

    @property
    def size(self) -> int:
        return len(self.data)

    def release(self) -> None:
        """Drop the payload; the preview reference stops resolving."""
        self.data = b""
        self.released = True


class UploadStaging:
    """
    Avatar, cover and ordered gallery slots for one onboarding session.
    """

    def __init__(self):
        self.avatar: Optional[StagedFile] = None
        self.cover: Optional[StagedFile] = None
        self.gallery: List[StagedFile] = []

    @property
    def is_empty(self) -> bool:
        return self.avatar is None and self.cover is None and not self.gallery

    def stage_avatar(self, staged: StagedFile) -> StagedFile:
        if self.avatar is not None:
            self.avatar.release()
        self.avatar = staged
        return staged

    def stage_cover(self, staged: StagedFile) -> StagedFile:
        if self.cover is not None:
            self.cover.release()
        self.cover = staged
        return staged

    def add_gallery_images(self, files: Iterable[StagedFile]) -> List[StagedFile]:
        added = list(files)
        self.gallery.extend(added)
        return added

    def remove_gallery_image(self, index: int) -> StagedFile:
        """
        Remove and release the gallery image at ``index``; the rest keep their order.

        Raises:
            IndexError: If ``index`` is out of range
        """
        if index < 0 or index >= len(self.gallery):
            raise IndexError(f"No gallery image at index {index}")
        staged = self.gallery.pop(index)
        staged.release()
        return staged

    def get_by_ref(self, preview_ref: str) -> Optional[StagedFile]:
        for staged in self.all_files():
            if staged.preview_ref == preview_ref:
                return staged
        return None

    def all_files(self) -> List[StagedFile]:
        files = [staged for staged in (self.avatar, self.cover) if staged is not None]
        return files + list(self.gallery)

    def release_all(self) -> None:
        for staged in self.all_files():
            staged.release()
        self.avatar = None
        self.cover = None
        self.gallery = []
