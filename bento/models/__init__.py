from models.checkin import CheckinMessage, CHECKIN_FORMAT, CHECKIN_TYPE

__all__ = ["CheckinMessage", "CHECKIN_FORMAT", "CHECKIN_TYPE"]
