"""End-to-end scrape flows against the Prometheus-backed application.

Mirrors how a test harness drives the exporter: post a recipe, scrape
repeatedly, delete, and post again.
"""

import pytest
from fastapi.testclient import TestClient

from any_exporter.api.app import create_app

COUNTER_AND_GAUGE = b"""
spec:
  name: test1
  type: counter
  labels: [aaa, bbb]
data:
  - labels:
      - key: aaa
        value: aaa_val1
      - key: bbb
        value: bbb_val1
    sequence: "1 2 3"
  - labels:
      - key: aaa
        value: aaa_val1
      - key: bbb
        value: bbb_val2
    sequence: "0 1 1"
---
spec:
  name: test2
  type: gauge
  labels: [aaa, ccc]
data:
  - labels:
      - key: aaa
        value: aaa_val2
      - key: ccc
        value: ccc_val1
    sequence: "0 1 0"
"""

HISTOGRAM = b"""
spec:
  name: test3
  type: histogram
  labels: [ccc, ddd]
  buckets: [0.5, 1, 2, 4, 8, 16, 32]
data:
  - labels:
      - key: ccc
        value: ccc_val1
      - key: ddd
        value: ddd_val1
    sequence: "0.7 1.5 40"
  - labels:
      - key: ccc
        value: ccc_val2
      - key: ddd
        value: ddd_val2
    sequence: "0.1 3 5"
"""

T1_A = 'test1_total{aaa="aaa_val1",bbb="bbb_val1"}'
T1_B = 'test1_total{aaa="aaa_val1",bbb="bbb_val2"}'
T2 = 'test2{aaa="aaa_val2",ccc="ccc_val1"}'


@pytest.fixture
def client():
    return TestClient(create_app())


def _post(client, body: bytes) -> int:
    return client.post("/recipe", content=body, headers={"Content-Type": "application/yaml"}).status_code


def _scrape(client) -> str:
    response = client.get("/metrics")
    assert response.status_code == 200
    return response.text


def test_counter_and_gauge_flow(client):
    assert _post(client, COUNTER_AND_GAUGE) == 200
    assert _post(client, COUNTER_AND_GAUGE) == 409

    metrics = _scrape(client)
    assert f"{T1_A} 1.0" in metrics
    assert f"{T1_B} 0.0" in metrics
    assert f"{T2} 0.0" in metrics

    metrics = _scrape(client)
    assert f"{T1_A} 2.0" in metrics
    assert f"{T1_B} 1.0" in metrics
    assert f"{T2} 1.0" in metrics

    # test2 and the second test1 series are drained here
    metrics = _scrape(client)
    assert f"{T1_A} 3.0" in metrics
    assert f"{T1_B} 1.0" in metrics
    assert f"{T2} 0.0" in metrics

    metrics = _scrape(client)
    assert f"{T1_A} 3.0" in metrics
    assert f"{T1_B} 1.0" in metrics
    assert f"{T2} 0.0" in metrics

    response = client.delete("/recipe")
    assert response.status_code == 200
    assert response.json()["removed"] == ["test1", "test2"]

    metrics = _scrape(client)
    assert "test1" not in metrics
    assert "test2" not in metrics

    assert _post(client, COUNTER_AND_GAUGE) == 200
    assert f"{T1_A} 1.0" in _scrape(client)


def test_graceful_delete_keeps_pending_metrics(client):
    assert _post(client, COUNTER_AND_GAUGE) == 200
    _scrape(client)

    assert client.delete("/recipe").json()["removed"] == []
    assert f"{T1_A} 2.0" in _scrape(client)

    assert client.delete("/recipe", params={"force": "true"}).json()["removed"] == ["test1", "test2"]
    assert "test1" not in _scrape(client)
    assert _post(client, COUNTER_AND_GAUGE) == 200


def test_histogram_flow(client):
    assert _post(client, HISTOGRAM) == 200
    assert _post(client, HISTOGRAM) == 409

    metrics = _scrape(client)
    assert 'test3_bucket{ccc="ccc_val1",ddd="ddd_val1",le="0.5"} 0.0' in metrics
    assert 'test3_bucket{ccc="ccc_val1",ddd="ddd_val1",le="1.0"} 1.0' in metrics
    assert 'test3_bucket{ccc="ccc_val2",ddd="ddd_val2",le="0.5"} 1.0' in metrics

    metrics = _scrape(client)
    assert 'test3_bucket{ccc="ccc_val1",ddd="ddd_val1",le="1.0"} 1.0' in metrics
    assert 'test3_bucket{ccc="ccc_val1",ddd="ddd_val1",le="2.0"} 2.0' in metrics
    assert 'test3_bucket{ccc="ccc_val2",ddd="ddd_val2",le="2.0"} 1.0' in metrics
    assert 'test3_bucket{ccc="ccc_val2",ddd="ddd_val2",le="4.0"} 2.0' in metrics

    metrics = _scrape(client)
    assert 'test3_bucket{ccc="ccc_val1",ddd="ddd_val1",le="32.0"} 2.0' in metrics
    assert 'test3_bucket{ccc="ccc_val1",ddd="ddd_val1",le="+Inf"} 3.0' in metrics
    assert 'test3_bucket{ccc="ccc_val2",ddd="ddd_val2",le="4.0"} 2.0' in metrics
    assert 'test3_bucket{ccc="ccc_val2",ddd="ddd_val2",le="8.0"} 3.0' in metrics

    assert client.delete("/recipe").json()["removed"] == ["test3"]


def test_invalid_recipe_is_rejected_atomically(client):
    bad = COUNTER_AND_GAUGE.replace(b'"0 1 0"', b'"0 1+1x1.5"')

    response = client.post("/recipe", content=bad)

    assert response.status_code == 400
    assert response.json()["index"] == 1
    assert "test1" not in _scrape(client)


def test_decreasing_counter_is_rejected(client):
    bad = COUNTER_AND_GAUGE.replace(b'"1 2 3"', b'"3 2 1"')

    response = client.post("/recipe", content=bad)

    assert response.status_code == 400
    assert "non-decreasing" in response.json()["detail"]


def test_label_mismatch_is_rejected(client):
    bad = COUNTER_AND_GAUGE.replace(b"key: ccc", b"key: ddd")

    assert client.post("/recipe", content=bad).status_code == 400


def test_reserved_label_is_rejected(client):
    bad = HISTOGRAM.replace(b"labels: [ccc, ddd]", b"labels: [ccc, le]").replace(b"key: ddd", b"key: le")

    assert client.post("/recipe", content=bad).status_code == 400
    assert client.post("/recipe", content=HISTOGRAM.replace(b"ddd", b"eee")).status_code == 200


NEGATIVE_COUNTER = b"""
spec:
  name: neg
  type: counter
  labels: [aaa]
data:
  - labels:
      - key: aaa
        value: x
    sequence: "-5 -3 0"
---
spec:
  name: gg
  type: gauge
  labels: [aaa]
data:
  - labels:
      - key: aaa
        value: x
    sequence: "7 8 9"
"""


def test_counter_starting_below_zero_is_rejected(client):
    response = client.post("/recipe", content=NEGATIVE_COUNTER)

    assert response.status_code == 400
    assert response.json()["index"] == 0
    assert "below zero" in response.json()["detail"]

    text = _scrape(client)
    assert "neg" not in text
    assert "gg{" not in text


def test_scrapes_keep_working_after_negative_counter_rejected(client):
    assert _post(client, NEGATIVE_COUNTER) == 400

    assert _post(client, NEGATIVE_COUNTER.replace(b'"-5 -3 0"', b'"0 3 5"')) == 200

    first = _scrape(client)
    assert 'neg_total{aaa="x"} 0.0' in first
    assert 'gg{aaa="x"} 7.0' in first
    second = _scrape(client)
    assert 'neg_total{aaa="x"} 3.0' in second
    assert 'gg{aaa="x"} 8.0' in second
