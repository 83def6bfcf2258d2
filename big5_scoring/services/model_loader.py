"""
Big Five — Static Model Loader

Reads the item mapping and per-aspect linear models from JSON and returns
an immutable ``ScoringModel``.  Any problem with either file is fatal: the
loader raises ``ModelDataUnavailable`` and no scorer is built, so there is
never a partially initialised scoring mode.

Checks performed
----------------
- both files exist and parse as JSON;
- records match the pydantic layouts (``ItemMappingFile``,
  ``AspectModelsFile``), which also rejects unknown aspect labels;
- exactly ``EXPECTED_ITEM_COUNT`` items with indices ``0 .. n-1``;
- every aspect has at least one item and a linear model with finite
  coefficients;
- an embedded ``aspects`` list names each aspect exactly once;
- an embedded ``level_encoding`` agrees with the fixed five-point scale.

The packaged items are the public-domain BFAS statements.  The packaged
``a, b`` coefficients are authored placeholders, not fitted to norm
data; point ``BIG5_DATA_DIR`` at calibrated files for real use.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import structlog
from pydantic import ValidationError

from big5_scoring.config import Settings, get_settings
from big5_scoring.exceptions import ModelDataUnavailable
from big5_scoring.schemas.questionnaire import (
    LEVEL_ENCODING,
    Aspect,
    AspectModelsFile,
    ItemMappingFile,
    QuestionnaireItem,
    ScoringModel,
)

logger = structlog.get_logger("big5.model_loader")


def load_scoring_model(settings: Optional[Settings] = None) -> ScoringModel:
    """Load and validate the static scoring tables.

    Parameters
    ----------
    settings:
        Configuration to read file locations from; defaults to
        ``get_settings()``.

    Returns
    -------
    ScoringModel
        Items sorted by index plus one linear model per aspect.

    Raises
    ------
    ModelDataUnavailable
        If either file is missing, unreadable or malformed.
    """
    settings = settings or get_settings()
    item_path = settings.item_mapping_path
    models_path = settings.aspect_models_path
    log = logger.bind(item_mapping=str(item_path), aspect_models=str(models_path))

    raw_items = _read_json(item_path)
    raw_models = _read_json(models_path)

    try:
        item_file = ItemMappingFile.model_validate(raw_items)
        models_file = AspectModelsFile.model_validate(raw_models)
    except ValidationError as exc:
        log.error("model_data_invalid", errors=exc.error_count())
        raise ModelDataUnavailable(
            "Scoring model data failed schema validation",
            details={"errors": exc.errors(include_url=False, include_input=False)},
        ) from exc

    items = _check_items(item_file.items, settings.EXPECTED_ITEM_COUNT)
    _check_linear_models(models_file)
    _check_level_encoding(models_file.level_encoding)

    model = ScoringModel(
        items=tuple(items),
        linear_models=dict(models_file.linear_models),
        model_version=models_file.model_version or settings.MODEL_VERSION,
    )
    log.info(
        "model_loaded",
        n_items=model.item_count,
        n_models=len(model.linear_models),
        model_version=model.model_version,
    )
    return model


# ──────────────────────────────────────────────────────────────────────────────
# Private helpers
# ──────────────────────────────────────────────────────────────────────────────

def _read_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as exc:
        logger.error("model_file_missing", path=str(path))
        raise ModelDataUnavailable(
            f"Scoring model file not found: {path}", details={"path": str(path)}
        ) from exc
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.error("model_file_unreadable", path=str(path), error=str(exc))
        raise ModelDataUnavailable(
            f"Scoring model file unreadable: {path}",
            details={"path": str(path), "error": str(exc)},
        ) from exc


def _check_items(
    items: list[QuestionnaireItem], expected_count: int
) -> list[QuestionnaireItem]:
    if len(items) != expected_count:
        raise ModelDataUnavailable(
            f"Expected {expected_count} questionnaire items, found {len(items)}",
            details={"expected": expected_count, "actual": len(items)},
        )

    ordered = sorted(items, key=lambda item: item.index)
    indices = [item.index for item in ordered]
    if indices != list(range(expected_count)):
        raise ModelDataUnavailable(
            "Questionnaire item indices must be unique and contiguous from 0",
            details={"indices": indices},
        )

    covered = {item.aspect for item in ordered}
    missing = [aspect.value for aspect in Aspect if aspect not in covered]
    if missing:
        raise ModelDataUnavailable(
            "Some aspects have no questionnaire items",
            details={"missing_aspects": missing},
        )
    return ordered


def _check_linear_models(models_file: AspectModelsFile) -> None:
    missing = [a.value for a in Aspect if a not in models_file.linear_models]
    if missing:
        raise ModelDataUnavailable(
            "Linear models missing for some aspects",
            details={"missing_aspects": missing},
        )

    # The optional aspect list must name each aspect exactly once.
    declared = models_file.aspects
    if declared is not None and sorted(declared) != sorted(Aspect):
        raise ModelDataUnavailable(
            "Declared aspect list does not match the ten aspects",
            details={"aspects": [a.value for a in declared]},
        )


def _check_level_encoding(encoding: Optional[dict[str, float]]) -> None:
    if encoding is None:
        return
    expected = {level.value: value for level, value in LEVEL_ENCODING.items()}
    if encoding != expected:
        raise ModelDataUnavailable(
            "Level encoding in model data disagrees with the fixed response scale",
            details={"expected": expected, "actual": encoding},
        )
