from objtasks.codec.json_codec import from_json, to_json

__all__ = ["from_json", "to_json"]
