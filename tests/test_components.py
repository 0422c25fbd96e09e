from contextlib import nullcontext
from dataclasses import replace

from components import data_source
from components.update_card import badge_html
from services.sample_data import SAMPLE_UPDATES


class FakeStreamlit:
    """Records widget calls; every button stays unpressed and no file is uploaded."""

    def __init__(self):
        self.session_state = {}
        self.uploader_kwargs = None

    def file_uploader(self, label, **kwargs):
        self.uploader_kwargs = kwargs
        return None

    def checkbox(self, label, **kwargs):
        return False

    def button(self, label, **kwargs):
        return False

    def expander(self, label, **kwargs):
        return nullcontext()

    def __getattr__(self, name):
        # markdown, caption, code, success, ...
        return lambda *args, **kwargs: None


def test_uploader_accepts_any_extension(monkeypatch):
    fake = FakeStreamlit()
    monkeypatch.setattr(data_source, "st", fake)

    result = data_source.DataSourceComponent().render()

    assert result == {'data_loaded': False}
    assert fake.uploader_kwargs["type"] is None


def test_badge_escapes_imported_goal_text():
    record = replace(SAMPLE_UPDATES[0], priority_goal='<img src=x onerror="alert(1)">Growth')

    badge = badge_html(record)

    assert "<img" not in badge
    assert "&lt;img src=x onerror=&quot;alert(1)&quot;&gt;Growth" in badge
    assert ">Healthy</span>" in badge
