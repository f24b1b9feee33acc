"""Pydantic schemas for toast notifications."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ToastType(str, Enum):
    """Visual category of a toast."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    DEFAULT = "default"


class ToastOptions(BaseModel):
    """Display options shared by every toast the notifier emits."""

    model_config = ConfigDict(populate_by_name=True)

    auto_close: int = Field(default=5000, ge=0, alias="autoClose", description="Milliseconds before closing, 0 keeps it open")
    position: str = Field(default="top-right", description="Screen corner the toast appears in")
    theme: str = Field(default="light", description="Toast color theme")


class Toast(ToastOptions):
    """A single message shown to the user."""

    message: str = Field(min_length=1, description="Text shown in the toast")
    type: ToastType = ToastType.DEFAULT
