"""Data preparation for export."""

import datetime
import json
from typing import Any, Dict


def to_jsonable(result: Any) -> Any:
    """Convert entities (or lists of them) into plain JSON-ready values."""
    if isinstance(result, list):
        return [to_jsonable(item) for item in result]
    if hasattr(result, "to_dict"):
        return result.to_dict()
    return result


def prepare_export(operation: str, params: Dict[str, Any], result: Any) -> Dict[str, Any]:
    """Wrap an operation result with the call that produced it."""
    data = to_jsonable(result)
    return {
        "operation": operation,
        "params": {key: value for key, value in params.items() if value is not None},
        "count": len(data) if isinstance(data, list) else 1,
        "result": data,
        "metadata": {
            "export_timestamp": None,  # Will be set by caller
            "version": "1.0.0"
        }
    }


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    # Add timestamp
    data["metadata"]["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
