"""
Opt-in behaviours: whole subtree delete and multi-hop cycle guard.
"""
import pytest

from config import settings


@pytest.fixture
def deep_delete(monkeypatch):
    monkeypatch.setattr(settings, "MENU_DEEP_DELETE", True)


@pytest.fixture
def cycle_check(monkeypatch):
    monkeypatch.setattr(settings, "MENU_CYCLE_CHECK", True)


def test_deep_delete_removes_whole_subtree(client, admin_headers, create_menu, deep_delete):
    root = create_menu("Root")
    child = create_menu("Child", parentId=root["id"])
    grandchild = create_menu("Grandchild", parentId=child["id"])
    create_menu("GreatGrandchild", parentId=grandchild["id"])
    create_menu("Other")

    response = client.delete("/admin/menu/delete", params={"menu_id": root["id"]}, headers=admin_headers)

    assert response.status_code == 200
    assert [m["title"] for m in client.post("/admin/menu/list").json()["data"]] == ["Other"]


def test_deep_delete_survives_existing_cycle(client, admin_headers, create_menu, deep_delete):
    a = create_menu("A")
    b = create_menu("B", parentId=a["id"])
    client.put("/admin/menu/update", params={"menu_id": a["id"]}, json={"parentId": b["id"]},
               headers=admin_headers)

    response = client.delete("/admin/menu/delete", params={"menu_id": a["id"]}, headers=admin_headers)

    assert response.status_code == 200
    assert client.post("/admin/menu/list").json()["data"] == []


def test_cycle_check_rejects_multi_hop_cycle(client, admin_headers, create_menu, cycle_check):
    a = create_menu("A")
    b = create_menu("B", parentId=a["id"])
    c = create_menu("C", parentId=b["id"])

    response = client.put("/admin/menu/update", params={"menu_id": a["id"]},
                          json={"parentId": c["id"]}, headers=admin_headers)

    assert response.status_code == 400
    assert "descendant" in response.json()["msg"]
    assert client.post("/admin/menu/get", params={"menu_id": a["id"]}).json()["data"]["parentId"] is None


def test_cycle_check_allows_regular_moves(client, admin_headers, create_menu, cycle_check):
    a = create_menu("A")
    b = create_menu("B", parentId=a["id"])
    c = create_menu("C")

    response = client.put("/admin/menu/update", params={"menu_id": b["id"]},
                          json={"parentId": c["id"]}, headers=admin_headers)
    assert response.status_code == 200

    response = client.put("/admin/menu/update", params={"menu_id": c["id"]},
                          json={"parentId": a["id"]}, headers=admin_headers)
    assert response.status_code == 200

    tree = client.post("/admin/menu/list", params={"tree": True}).json()["data"]
    assert [n["title"] for n in tree] == ["A"]
    assert tree[0]["children"][0]["title"] == "C"
    assert tree[0]["children"][0]["children"][0]["title"] == "B"


def test_cycle_check_still_reports_self_parent(client, admin_headers, create_menu, cycle_check):
    a = create_menu("A")

    response = client.put("/admin/menu/update", params={"menu_id": a["id"]},
                          json={"parentId": a["id"]}, headers=admin_headers)

    assert response.status_code == 400
    assert "own parent" in response.json()["msg"]
