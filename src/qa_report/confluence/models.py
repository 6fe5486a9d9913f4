"""Pydantic models for the Confluence REST API (content endpoints).

Only the fields this service reads are declared; everything else in the
upstream JSON is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class StorageBody(BaseModel):
    """Page body in the storage (XHTML) representation."""

    value: str
    representation: str = "storage"


class PageBody(BaseModel):
    storage: StorageBody


class PageLinks(BaseModel):
    webui: str


class TemplatePage(BaseModel):
    """Response of GET /content/{id}?expand=body.storage."""

    id: str
    title: str = ""
    body: PageBody

    @property
    def storage_value(self) -> str:
        return self.body.storage.value


class CreatedPage(BaseModel):
    """Response of POST /content."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str = ""
    links: PageLinks = Field(alias="_links")


class SpaceRef(BaseModel):
    key: str


class ParentRef(BaseModel):
    id: str


class CreatePagePayload(BaseModel):
    """Request body of POST /content for a new page under a parent."""

    type: str = "page"
    title: str
    space: SpaceRef
    parent: ParentRef
    body: PageBody

    @classmethod
    def build(cls, title: str, space_key: str, parent_id: str, storage_value: str) -> "CreatePagePayload":
        """Assemble a page payload from plain values."""
        return cls(
            title=title,
            space=SpaceRef(key=space_key),
            parent=ParentRef(id=parent_id),
            body=PageBody(storage=StorageBody(value=storage_value)),
        )
