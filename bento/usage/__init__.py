from usage.usage_timestamp import record_usage_timestamp
from usage.uuid_generation import generate_uuid

__all__ = ["generate_uuid", "record_usage_timestamp"]
