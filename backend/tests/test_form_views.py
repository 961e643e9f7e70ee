"""Tests for the server rendered liquidación form."""

from __future__ import annotations

from datetime import datetime

import pytest

from conftest import FakeResponse


@pytest.fixture(autouse=True)
def frozen_today(monkeypatch: pytest.MonkeyPatch):
    from backend.app.form import views

    monkeypatch.setattr(views, "_today", lambda: datetime(2025, 5, 20, 9, 0, 0))


def test_index_defaults_to_current_month_and_year(client):
    response = client.get("/")

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert "Generar liquidación" in html
    assert '<option value="5" selected>Mayo</option>' in html
    assert "2025" in html
    assert "¿Confirmar?" not in html


def test_confirm_shows_dialog_for_selected_month(client):
    response = client.post("/confirm", data={"month": "9"})

    html = response.get_data(as_text=True)
    assert "¿Confirmar?" in html
    assert "<b>Septiembre 2025</b>" in html


@pytest.mark.parametrize("month", ["42", "abc", "", "1_2"])
def test_confirm_with_unusable_month_confirms_current_month(client, month):
    response = client.post("/confirm", data={"month": month})

    html = response.get_data(as_text=True)
    assert "<b>Mayo 2025</b>" in html
    assert '<input type="hidden" name="month" value="5">' in html
    assert "invalid month" not in html


def test_cancel_returns_to_idle_without_posting(client, webhook):
    response = client.post("/submit", data={"month": "9", "action": "cancel"})

    html = response.get_data(as_text=True)
    assert "¿Confirmar?" not in html
    assert '<option value="9" selected>Septiembre</option>' in html
    assert webhook.calls == []


def test_submit_success_renders_confirmation(client, webhook):
    response = client.post("/submit", data={"month": "2", "action": "confirm"})

    html = response.get_data(as_text=True)
    assert "Liquidación de Febrero 2025 enviada. Timestamp:" in html
    assert "Reiniciar" in html
    assert webhook.calls[0]["json"]["month"] == 2
    assert webhook.calls[0]["json"]["year"] == 2025


def test_submit_failure_renders_error(client, webhook):
    webhook.response = FakeResponse(status_code=500, text="boom")

    response = client.post("/submit", data={"month": "2", "action": "confirm"})

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert "webhook responded 500. boom" in html
    assert 'class="alert error"' in html


def test_submit_with_tampered_month_shows_validation_error(client, webhook):
    response = client.post("/submit", data={"month": "42", "action": "confirm"})

    assert "invalid month" in response.get_data(as_text=True)
    assert webhook.calls == []


def test_reset_returns_to_idle_keeping_month(client):
    response = client.post("/reset", data={"month": "2", "status": "success"})

    html = response.get_data(as_text=True)
    assert "Reiniciar" not in html
    assert '<option value="2" selected>Febrero</option>' in html


def test_reset_with_unknown_status_falls_back_to_idle(client):
    response = client.post("/reset", data={"month": "2", "status": "loading"})

    assert response.status_code == 200
    assert "Reiniciar" not in response.get_data(as_text=True)
