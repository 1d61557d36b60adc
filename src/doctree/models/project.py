"""
doctree data model for registered projects.

A registered project is one entry of the autoindex catalog: a label, the
absolute path of the project root, and the fingerprint of its tree taken at
registration time.
"""

from pydantic import BaseModel, ConfigDict, Field


class AutoIndexedProject(BaseModel):
    """A project registered for automatic indexing.

    The fingerprint is stored under the ``hash`` key on disk.
    """

    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    name: str = Field(..., min_length=1, description="Project name")
    path: str = Field(..., description="Absolute path of the project root")
    fingerprint: str = Field(..., alias="hash", description="Digest of the directory tree")

    def to_json_dict(self) -> dict[str, str]:
        """Serialize using the on-disk field names."""
        return self.model_dump(by_alias=True)

    def __str__(self) -> str:
        return f"AutoIndexedProject(name={self.name}, path={self.path})"
