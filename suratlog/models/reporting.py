from pydantic import BaseModel


class SummaryStats(BaseModel):
    incoming_count: int = 0
    outgoing_count: int = 0

    @property
    def total(self) -> int:
        return self.incoming_count + self.outgoing_count
