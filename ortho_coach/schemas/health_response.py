"""
Description:
Response body of GET /api/health: liveness plus the name of the feedback
engine the service is scoring with ("heuristic" or "remote+heuristic").

Dependencies:
- pydantic: For data validation and settings management.

Author: @kcaparas1630
"""
from pydantic import BaseModel

class HealthResponse(BaseModel):
    status: str
    engine: str
