from pydantic import BaseModel, Field
from typing import Literal


class AutomationConfig(BaseModel):
    # DispatchEx launches a private Office process; Dispatch may attach to a running one
    isolated_instance: bool = True


class ConversionConfig(BaseModel):
    lazy_sessions: bool = False
    overwrite: bool = True


class CollectorConfig(BaseModel):
    skip_lock_files: bool = True


class OutputConfig(BaseModel):
    dir_name: str = "PDF"


class OfficePdfConfig(BaseModel):
    automation: AutomationConfig = Field(default_factory=AutomationConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    collector: CollectorConfig = Field(default_factory=CollectorConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    wait_for_exit: bool = True
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
