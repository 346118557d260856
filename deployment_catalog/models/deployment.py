# deployment_catalog/models/deployment.py
"""Deployment descriptor models"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Any

from ..constants import FILE_KINDS


def format_last_modified(value: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with millisecond precision"""
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass
class FileEntry:
    """Classified data file inside a deployment directory"""
    name: str  # File base name
    download_url: str
    size: int  # File size in bytes
    last_modified: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'name': self.name,
            'downloadUrl': self.download_url,
            'size': self.size,
            'last_modified': format_last_modified(self.last_modified)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FileEntry':
        """Create from dictionary"""
        last_modified = data['last_modified']
        if isinstance(last_modified, str):
            last_modified = datetime.fromisoformat(last_modified.replace('Z', '+00:00'))
        return cls(
            name=data['name'],
            download_url=data['downloadUrl'],
            size=data['size'],
            last_modified=last_modified
        )


def empty_file_groups() -> Dict[str, List[FileEntry]]:
    """Create one empty list per recognized file kind"""
    return {kind: [] for kind in FILE_KINDS}


@dataclass
class DeploymentDescriptor:
    """Summary of one deployment directory

    A descriptor is either valid (manifest present, carrying ``files`` and
    locators) or invalid (carrying only ``message``).
    """
    name: str
    valid: bool
    message: Optional[str] = None
    files: Optional[Dict[str, List[FileEntry]]] = None
    url: Optional[str] = None
    listing_url: Optional[str] = None

    @classmethod
    def invalid(cls, name: str, message: str) -> 'DeploymentDescriptor':
        """Create a descriptor for a directory that failed validation"""
        return cls(name=name, valid=False, message=message)

    @classmethod
    def create_valid(cls, name: str, url: str, listing_url: str) -> 'DeploymentDescriptor':
        """Create a valid descriptor with empty file groups"""
        return cls(
            name=name,
            valid=True,
            files=empty_file_groups(),
            url=url,
            listing_url=listing_url
        )

    def add_file(self, kind: str, entry: FileEntry) -> None:
        """Append a file entry to the group for ``kind``"""
        if not self.valid:
            raise ValueError(f"Cannot add files to invalid deployment: {self.name}")
        self.files[kind].append(entry)

    @property
    def file_count(self) -> int:
        """Total number of classified files"""
        if not self.files:
            return 0
        return sum(len(entries) for entries in self.files.values())

    @property
    def total_size(self) -> int:
        """Total size of classified files in bytes"""
        if not self.files:
            return 0
        return sum(entry.size for entries in self.files.values() for entry in entries)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            'name': self.name,
            'valid': self.valid
        }

        if not self.valid:
            data['message'] = self.message
            return data

        data['files'] = {
            kind: [entry.to_dict() for entry in entries]
            for kind, entries in self.files.items()
        }
        data['url'] = self.url
        data['listingUrl'] = self.listing_url
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeploymentDescriptor':
        """Create from dictionary"""
        if not data['valid']:
            return cls.invalid(data['name'], data.get('message'))

        files = empty_file_groups()
        for kind, entries in data.get('files', {}).items():
            files[kind] = [FileEntry.from_dict(e) for e in entries]

        return cls(
            name=data['name'],
            valid=True,
            files=files,
            url=data.get('url'),
            listing_url=data.get('listingUrl')
        )
