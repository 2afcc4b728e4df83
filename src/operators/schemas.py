from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional
from src.enums import TransportMode

class OperatorBase(BaseModel):
    name: str
    mode: TransportMode
    logo: Optional[str] = None

class Operator(OperatorBase):
    id: str
    
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
