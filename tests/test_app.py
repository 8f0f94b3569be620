import threading
import time

import pytest

import main


@pytest.fixture
def client():
    wait_idle()
    main.config.set_speed(50)
    main.config.select_algorithm("bubble")
    main.config.set_array_content("")
    main.config.set_array_size(20)
    with main.app.test_client() as c:
        yield c
    wait_idle()


def wait_idle(timeout=10.0):
    deadline = time.monotonic() + timeout
    while main.controller.is_running:
        if time.monotonic() > deadline:
            raise AssertionError("run did not finish")
        time.sleep(0.02)


def test_index_page(client):
    res = client.get("/")
    assert res.status_code == 200
    assert b"Sorting Visualizer" in res.data
    assert b"btn-start" in res.data


def test_state_endpoint(client):
    data = client.get("/api/state").get_json()
    assert data["state"] == "idle"
    assert data["speed"] == 50
    assert data["delay_ms"] == 50
    assert data["svg"].startswith("<svg")


def test_generate_from_text_then_reset(client):
    data = client.post("/api/array/generate", json={"text": "4, 1, 3"}).get_json()
    assert data["accepted"]
    assert data["values"] == [4, 1, 3]

    data = client.post("/api/array/reset").get_json()
    assert data["values"] == [4, 1, 3]


def test_generate_random_uses_size(client):
    client.post("/api/config/size", json={"size": 12})
    data = client.post("/api/array/generate", json={"text": ""}).get_json()
    assert len(data["values"]) == 12


def test_speed_is_clamped_and_validated(client):
    data = client.post("/api/config/speed", json={"speed": 500}).get_json()
    assert data == {"speed": 50, "delay_ms": 50}
    res = client.post("/api/config/speed", json={"speed": "fast"})
    assert res.status_code == 400


def test_unknown_algorithm_is_rejected(client):
    data = client.post("/api/config/algo", json={"algo_key": "bogo"}).get_json()
    assert not data["accepted"]
    assert data["algorithm"] == "bubble"

    data = client.post("/api/config/algo", json={"algo_key": "quick"}).get_json()
    assert data["accepted"]
    assert data["label"] == "Quick Sort"


def test_pause_while_idle_is_inert(client):
    data = client.post("/api/run/pause").get_json()
    assert not data["accepted"]
    assert data["state"] == "idle"


def test_run_sorts_in_the_background(client):
    client.post("/api/array/generate", json={"text": "2, 1"})
    finished = main.recorder.runs_finished
    data = client.post("/api/run").get_json()
    assert data["accepted"]

    deadline = time.monotonic() + 10
    while main.recorder.runs_finished == finished:
        assert time.monotonic() < deadline, "run did not finish"
        time.sleep(0.02)
    data = client.get("/api/state").get_json()
    assert data["state"] == "idle"
    assert data["values"] == [1, 2]
    assert data["sorted"] == [0, 1]
    assert "Bubble Sort" in data["analytics"]


def test_non_object_json_bodies_are_ignored(client):
    res = client.post("/api/config/speed", json=[1])
    assert res.status_code == 200
    assert res.get_json()["speed"] == 50

    res = client.post("/api/array/generate", json=[1, 2])
    assert res.status_code == 200


def test_non_string_algorithm_key_is_rejected(client):
    res = client.post("/api/config/algo", json={"algo_key": ["quick"]})
    assert res.status_code == 200
    data = res.get_json()
    assert not data["accepted"]
    assert data["algorithm"] == "bubble"


def test_concurrent_starts_accept_exactly_one(client):
    client.post("/api/config/speed", json={"speed": 1})
    client.post("/api/array/generate", json={"text": "5, 4, 3, 2, 1"})
    finished = main.recorder.runs_finished

    barrier = threading.Barrier(2)
    answers = []

    def start():
        with main.app.test_client() as c:
            barrier.wait()
            answers.append(c.post("/api/run").get_json()["accepted"])

    threads = [threading.Thread(target=start) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    assert sorted(answers) == [False, True]

    main.config.set_speed(50)
    deadline = time.monotonic() + 30
    while main.recorder.runs_finished == finished:
        assert time.monotonic() < deadline, "run did not finish"
        time.sleep(0.02)
    wait_idle()
    assert main.recorder.runs_finished == finished + 1
    assert main.store.to_array() == [1, 2, 3, 4, 5]
