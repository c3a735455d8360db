"""Supabase Storage implementation of the image service."""

from dataclasses import dataclass

from supabase import Client

from photo_hunt.services.photos import ImageService


@dataclass
class SupabaseImageService(ImageService):
    """Serves images from a Supabase Storage bucket.

    Sized variants go through the storage image transformation endpoint and
    keep the aspect ratio, so ``size`` bounds the longest edge.
    """

    client: Client
    bucket: str

    def serving_url(
        self, blob_key: str, size: int | None = None, secure: bool = True
    ) -> str:
        """Return the public URL of an image, optionally resized."""
        bucket = self.client.storage.from_(self.bucket)
        if size is None:
            url = bucket.get_public_url(blob_key)
        else:
            url = bucket.get_public_url(
                blob_key,
                {"transform": {"width": size, "height": size, "resize": "contain"}},
            )
        if secure and url.startswith("http://"):
            url = "https://" + url.removeprefix("http://")
        return url

    def create_upload_url(self, blob_key: str) -> str:
        """Return a signed URL for uploading image bytes to ``blob_key``."""
        response = self.client.storage.from_(self.bucket).create_signed_upload_url(
            blob_key
        )
        url = response.get("signed_url") or response.get("signedUrl")
        if not url:
            raise RuntimeError("Supabase did not return an upload URL")
        return str(url)
