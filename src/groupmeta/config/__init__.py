import os

LOG_FORMATS = ("console", "json")


class Config:
    def __init__(self):
        # logging
        self.LOG_LEVEL = os.getenv("GROUPMETA_LOG_LEVEL", "info").lower()
        self.LOG_FORMAT = os.getenv("GROUPMETA_LOG_FORMAT", "console").lower()

        # decoding
        self.REPORT_OWNERSHIP = (
            os.getenv("GROUPMETA_REPORT_OWNERSHIP", "true").lower() == "true"
        )

        self.validate()

    def validate(self):
        if self.LOG_FORMAT not in LOG_FORMATS:
            raise ValueError(f"Unsupported log format: {self.LOG_FORMAT}")
