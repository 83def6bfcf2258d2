"""Shared pytest fixtures for the Big Five scoring tests."""
import json
import shutil

import pytest
import structlog

from big5_scoring.config import PACKAGE_DATA_DIR, Settings, get_settings
from big5_scoring.schemas.questionnaire import ResponseLevel
from big5_scoring.services.descriptions_service import DescriptionsService
from big5_scoring.services.model_loader import load_scoring_model
from big5_scoring.services.scoring_service import Big5ScoringService, get_scoring_service


@pytest.fixture(autouse=True)
def _clear_cached_singletons():
    """Settings and the scorer are lru-cached per process; reset around each test."""
    get_settings.cache_clear()
    get_scoring_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_scoring_service.cache_clear()
    structlog.reset_defaults()


@pytest.fixture(scope="session")
def scoring_model():
    return load_scoring_model(Settings(BIG5_DATA_DIR=str(PACKAGE_DATA_DIR)))


@pytest.fixture
def scoring_service(scoring_model):
    return Big5ScoringService(scoring_model)


@pytest.fixture
def descriptions_service():
    return DescriptionsService()


@pytest.fixture
def neutral_responses():
    return [ResponseLevel.NEUTRAL.value] * 100


@pytest.fixture
def strongly_agree_responses():
    return [ResponseLevel.STRONGLY_AGREE.value] * 100


@pytest.fixture
def keyed_responses(scoring_model):
    """Builds a response set that scores every item at the same signed value.

    ``keyed_responses(True)`` pushes every aspect to its maximum,
    ``keyed_responses(False)`` to its minimum.
    """

    def _build(high: bool):
        agree, disagree = ResponseLevel.STRONGLY_AGREE.value, ResponseLevel.STRONGLY_DISAGREE.value
        return [
            (disagree if item.reverse else agree) if high else (agree if item.reverse else disagree)
            for item in scoring_model.items
        ]

    return _build


@pytest.fixture
def data_dir(tmp_path):
    """Copy of the packaged data files that a test may edit freely."""
    for name in ("item_mapping.json", "aspect_models.json"):
        shutil.copy(PACKAGE_DATA_DIR / name, tmp_path / name)
    return tmp_path


@pytest.fixture
def edit_json():
    """Load a JSON file, apply ``mutate`` to the parsed object and write it back."""

    def _edit(path, mutate):
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        mutate(data)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f)

    return _edit
