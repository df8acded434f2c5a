import pytest


@pytest.mark.asyncio
async def test_healthz(client):
    res = await client.get('/healthz')
    assert res.status_code == 200
    assert res.json() == {'status': 'ok'}


@pytest.mark.asyncio
async def test_app_uses_injected_store(client, store):
    await store.like_post(2)
    res = await client.get('/api/posts/2')
    assert res.json()['likes'] == 13


def test_metrics_exporter_failure_is_logged_not_raised(monkeypatch, caplog):
    from blogapp import core

    def refuse(port):
        raise OSError('address already in use')

    monkeypatch.setattr(core, 'start_http_server', refuse)
    with caplog.at_level('WARNING', logger='blogapp.core'):
        core.init_metrics(9999)
    assert 'Prometheus start failed' in caplog.text


@pytest.mark.asyncio
async def test_startup_runs_metrics_when_enabled(monkeypatch, store):
    from blogapp import main

    calls = []
    monkeypatch.setattr(main, 'init_metrics', lambda: calls.append(True))
    app = main.create_app(store, metrics=True)
    async with app.router.lifespan_context(app):
        pass
    assert calls == [True]
