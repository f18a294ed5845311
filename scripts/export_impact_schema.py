"""Export the prompttax impact record JSON Schema."""

from __future__ import annotations

import json
from pathlib import Path

from prompttax.schemas import CURRENT_IMPACT_SCHEMA_VERSION, ImpactRecord, ImpactRequest


def main() -> None:
    """Write the request and record JSON Schemas to the repository root."""

    root = Path(__file__).resolve().parent.parent
    for name, model in (("impact_request", ImpactRequest), ("impact_record", ImpactRecord)):
        output_path = root / f"{name}_schema_v{CURRENT_IMPACT_SCHEMA_VERSION}.json"
        output_path.write_text(
            json.dumps(model.model_json_schema(), indent=2), encoding="utf-8"
        )


if __name__ == "__main__":
    main()
