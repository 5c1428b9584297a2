"""
Location model - A point in a named game world
Mirrors the shape Bukkit serializes into config.yml
"""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Location(BaseModel):
    """
    Immutable world position

    Bukkit writes locations as a mapping with a type marker:

        location:
          ==: org.bukkit.Location
          world: world_the_end
          x: 0.5
          y: 64.0
          z: 0.5
          yaw: 0.0
          pitch: 0.0

    The marker and any other unknown keys are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "world": "world_the_end",
                "x": 0.5,
                "y": 64.0,
                "z": 0.5
            }
        }
    )

    world: str = Field(..., min_length=1, description="World name")
    x: float = Field(..., allow_inf_nan=False, description="X coordinate")
    y: float = Field(..., allow_inf_nan=False, description="Y coordinate")
    z: float = Field(..., allow_inf_nan=False, description="Z coordinate")
    yaw: float = Field(default=0.0, allow_inf_nan=False, description="Rotation around the vertical axis")
    pitch: float = Field(default=0.0, allow_inf_nan=False, description="Vertical rotation")

    @field_validator("world")
    @classmethod
    def validate_world(cls, v):
        """Reject blank world names"""
        if not v.strip():
            raise ValueError("world must not be blank")
        return v

    @property
    def block_x(self) -> int:
        return math.floor(self.x)

    @property
    def block_y(self) -> int:
        return math.floor(self.y)

    @property
    def block_z(self) -> int:
        return math.floor(self.z)

    def distance(self, other: "Location") -> float:
        """
        Euclidean distance to another location

        Raises:
            ValueError: If the two locations are in different worlds
        """
        if other.world != self.world:
            raise ValueError(
                f"Cannot measure distance between worlds {self.world} and {other.world}"
            )
        return math.dist((self.x, self.y, self.z), (other.x, other.y, other.z))

    def __str__(self) -> str:
        return f"{self.world}, {self.block_x}, {self.block_y}, {self.block_z}"
