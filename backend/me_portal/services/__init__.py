from me_portal.services.record_store import RecordStore, get_record_store

__all__ = ["RecordStore", "get_record_store"]
