from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class TranscriptConfig(BaseModel):
    lang: Optional[str] = None

class CaptionTrack(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    language_code: str = Field(alias="languageCode")
    base_url: str = Field(alias="baseUrl")

class TranscriptSegment(BaseModel):
    text: str
    duration: float
    offset: float
    lang: str

TranscriptResult = List[TranscriptSegment]
