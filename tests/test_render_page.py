import httpx
import pytest

from app import app
from render_page import main, render_site


@pytest.mark.asyncio
async def test_render_site_writes_loaded_document(data_dir, tmp_path):
    output = tmp_path / "dist" / "index.html"
    await render_site("http://testserver", output, transport=httpx.ASGITransport(app=app))

    html = output.read_text(encoding="utf-8")
    assert html.startswith("<!DOCTYPE html>")
    assert html.count('class="product-item"') == 2
    assert "Gaijin Haiku" in html
    assert 'style="display: none;"' in html


def test_main_reports_unwritable_output(tmp_path, monkeypatch):
    async def fail_to_write(base_url, output, transport=None):
        raise PermissionError(f"cannot write {output}")

    monkeypatch.setattr("render_page.render_site", fail_to_write)
    assert main(["--output", str(tmp_path / "out.html")]) == 1


def test_main_writes_to_dist_by_default(monkeypatch):
    written = []

    async def record(base_url, output, transport=None):
        written.append((base_url, output))

    monkeypatch.setattr("render_page.render_site", record)
    assert main([]) == 0
    base_url, output = written[0]
    assert base_url.startswith("http://localhost:")
    assert output.parts[-2:] == ("dist", "index.html")
