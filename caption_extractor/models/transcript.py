from pydantic import BaseModel, ConfigDict

class SubtitleEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Seconds as written in the timed-text document, e.g. "12.34"
    start: str
    dur: str
    text: str

    @property
    def start_seconds(self) -> float:
        return float(self.start)

    @property
    def duration_seconds(self) -> float:
        return float(self.dur)

    @property
    def end_seconds(self) -> float:
        return self.start_seconds + self.duration_seconds
