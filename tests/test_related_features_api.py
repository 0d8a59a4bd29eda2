from unittest.mock import AsyncMock, patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

from core.exceptions import ValidationException
from related_features.api import router as related_features_router
from related_features.service import RelatedImages


def _create_app() -> FastAPI:
    app = FastAPI()
    app.include_router(related_features_router)
    return app


def test_get_related_features_success() -> None:
    app = _create_app()

    with patch("related_features.api.RelatedFeaturesService") as service_mock:
        instance = service_mock.return_value
        instance.find_related_images = AsyncMock(
            return_value=RelatedImages(
                label="Jane Doe",
                image_urls=("https://commons.org/img1.jpg",),
            ),
        )

        client = TestClient(app)
        response = client.get(
            "/api/related-features/421",
            params={"layer": "bridge-street", "lang": ["de-CH", "fr"]},
        )

    assert response.status_code == 200
    assert response.json() == {
        "feature_id": 421,
        "element": "relation(42)",
        "label": "Jane Doe",
        "images": ["https://commons.org/img1.jpg"],
    }
    instance.find_related_images.assert_awaited_once_with(
        421,
        languages=["de-CH", "fr"],
    )


def test_get_related_features_uses_accept_language() -> None:
    app = _create_app()

    with patch("related_features.api.RelatedFeaturesService") as service_mock:
        instance = service_mock.return_value
        instance.find_related_images = AsyncMock(return_value=RelatedImages.empty())

        client = TestClient(app)
        response = client.get(
            "/api/related-features/421",
            headers={"Accept-Language": "fr;q=0.4, nl-BE"},
        )

    assert response.status_code == 200
    instance.find_related_images.assert_awaited_once_with(
        421,
        languages=["nl-BE", "fr"],
    )


def test_get_related_features_nothing_to_show() -> None:
    app = _create_app()

    with patch("related_features.api.RelatedFeaturesService") as service_mock:
        instance = service_mock.return_value
        instance.find_related_images = AsyncMock(return_value=RelatedImages.empty())

        client = TestClient(app)
        response = client.get("/api/related-features/0")

    assert response.status_code == 200
    assert response.json() == {
        "feature_id": 0,
        "element": None,
        "label": None,
        "images": [],
    }


def test_get_related_features_ignores_non_bridge_layer() -> None:
    app = _create_app()

    with patch("related_features.api.RelatedFeaturesService") as service_mock:
        client = TestClient(app)
        response = client.get(
            "/api/related-features/421",
            params={"layer": "road-street"},
        )

    assert response.status_code == 200
    assert response.json()["images"] == []
    assert response.json()["element"] is None
    service_mock.assert_not_called()


def test_get_related_features_rejects_non_integer_id() -> None:
    client = TestClient(_create_app())

    response = client.get("/api/related-features/bridge")

    assert response.status_code == 422


def test_get_related_features_maps_validation_errors() -> None:
    app = _create_app()

    with patch("related_features.api.RelatedFeaturesService") as service_mock:
        instance = service_mock.return_value
        instance.find_related_images = AsyncMock(
            side_effect=ValidationException("Invalid label language"),
        )

        client = TestClient(app)
        response = client.get("/api/related-features/421")

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid label language"


def test_select_related_features_picks_first_bridge_feature() -> None:
    app = _create_app()

    with patch("related_features.api.RelatedFeaturesService") as service_mock:
        instance = service_mock.return_value
        instance.find_related_images = AsyncMock(
            return_value=RelatedImages(label="Ada", image_urls=()),
        )

        client = TestClient(app)
        response = client.post(
            "/api/related-features/select",
            json={
                "features": [
                    {"identifier": None, "layer": "bridge-street"},
                    {"identifier": 990, "layer": "road-primary"},
                    {"identifier": 71, "layer": "bridge-rail"},
                ],
                "lang": ["en"],
            },
        )

    assert response.status_code == 200
    assert response.json() == {
        "feature_id": 71,
        "element": "way(7)",
        "label": "Ada",
        "images": [],
    }
    instance.find_related_images.assert_awaited_once_with(71, languages=["en"])


def test_select_related_features_without_bridge() -> None:
    app = _create_app()

    with patch("related_features.api.RelatedFeaturesService") as service_mock:
        client = TestClient(app)
        response = client.post(
            "/api/related-features/select",
            json={"features": [{"identifier": 990, "layer": "water"}]},
        )

    assert response.status_code == 200
    assert response.json() == {
        "feature_id": None,
        "element": None,
        "label": None,
        "images": [],
    }
    service_mock.assert_not_called()
