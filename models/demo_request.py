from pydantic import BaseModel


class DemoRequestDTO(BaseModel):
    """Contact details submitted with a demo request."""
    name: str
    email: str
    phone: str
    country: str
