"""
Pydantic models for demo notifications.

Notifications are never stored.  ``NotificationRead`` describes the
receipt returned once the (simulated) delivery has completed.
"""

from pydantic import BaseModel, Field


class NotificationRead(BaseModel):
    """Receipt for a notification sent in demo mode."""

    id: str = Field(..., example="notif_lx2k9q1c_a1b2c")
    type: str = Field(..., example="whatsapp")
    recipient: str = Field(..., example="+15550100")
    message: str = Field(..., example="Stock for Gadget is running low")
    priority: str = Field("medium", example="high")
    status: str = "sent"
    timestamp: str
    demo_mode: bool = True
    note: str = "This is a demo notification. No actual message was sent."
