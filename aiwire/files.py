"""File upload, listing and deletion shapes."""

from __future__ import annotations

from dataclasses import dataclass

from aiwire.schema import Model


@dataclass
class FileData(Model):
    id: str
    object: str
    bytes: int
    created_at: int
    filename: str
    purpose: str


@dataclass
class FileListResponse(Model):
    object: str
    data: list[FileData]


@dataclass
class FileUploadRequest(Model):
    """Path of the file to upload and its purpose."""

    file: str
    purpose: str


@dataclass
class FileUploadResponse(Model):
    id: str
    object: str
    bytes: int
    created_at: int
    filename: str
    purpose: str


@dataclass
class FileDeleteRequest(Model):
    file_id: str


@dataclass
class FileDeleteResponse(Model):
    id: str
    object: str
    delete: bool


@dataclass
class FileRetrieveResponse(Model):
    id: str
    object: str
    bytes: int
    created_at: int
    filename: str
    purpose: str