"""
Forest assembly from flat menu records, no database involved.
"""
from apps.admin.schema import Menu
from apps.admin.tree import build_menu_tree, flatten_menu_tree


def menu(menu_id: int, parent_id: int | None = None, order: int = 0, title: str = None) -> Menu:
    return Menu(
        id=menu_id,
        parentId=parent_id,
        title=title or f"Menu {menu_id}",
        path=f"/m{menu_id}",
        roles=["admin"],
        order=order,
        createdBy="system",
        createdAt="2024-01-01 00:00:00",
    )


def ids(nodes) -> list[int]:
    return [n.id for n in nodes]


def test_empty_input_gives_empty_forest():
    assert build_menu_tree([]) == []


def test_dashboard_with_two_children_in_input_order():
    records = [
        menu(1, title="Dashboard"),
        menu(2, parent_id=1, title="Settings"),
        menu(3, parent_id=1, order=1, title="Profile"),
    ]
    forest = build_menu_tree(records)

    assert len(forest) == 1
    assert forest[0].title == "Dashboard"
    assert [c.title for c in forest[0].children] == ["Settings", "Profile"]
    assert forest[0].children[0].children == []


def test_unresolved_parent_becomes_root():
    forest = build_menu_tree([menu(1, parent_id=5)])

    assert ids(forest) == [1]
    assert forest[0].parentId == 5


def test_child_listed_before_parent_is_still_attached():
    forest = build_menu_tree([menu(2, parent_id=1), menu(1)])

    assert ids(forest) == [1]
    assert ids(forest[0].children) == [2]


def test_deep_nesting_is_assembled_without_recursion():
    records = [menu(1)] + [menu(i, parent_id=i - 1) for i in range(2, 200)]
    forest = build_menu_tree(records)

    assert ids(forest) == [1]
    depth, node = 1, forest[0]
    while node.children:
        node = node.children[0]
        depth += 1
    assert depth == 199


def test_every_record_appears_exactly_once():
    records = [
        menu(1), menu(2, parent_id=1), menu(3, parent_id=2), menu(4),
        menu(5, parent_id=4), menu(6, parent_id=99), menu(7, parent_id=1),
    ]
    forest = build_menu_tree(records)

    assert sorted(ids(flatten_menu_tree(forest))) == [1, 2, 3, 4, 5, 6, 7]


def test_sibling_and_root_order_follow_input():
    records = [menu(10), menu(4, parent_id=10), menu(3), menu(8, parent_id=10), menu(1, parent_id=10)]
    forest = build_menu_tree(records)

    assert ids(forest) == [10, 3]
    assert ids(forest[0].children) == [4, 8, 1]


def test_input_records_are_not_modified():
    records = [menu(1), menu(2, parent_id=1)]
    before = [r.model_dump() for r in records]

    build_menu_tree(records)

    assert [r.model_dump() for r in records] == before
    assert not hasattr(records[0], "children")


def test_two_node_cycle_is_left_out_of_the_forest():
    # 1 <-> 2 reach each other only through the cycle
    forest = build_menu_tree([menu(1, parent_id=2), menu(2, parent_id=1), menu(3)])

    assert ids(forest) == [3]


def test_flatten_walks_parents_before_children():
    records = [menu(1), menu(2, parent_id=1), menu(3, parent_id=2), menu(4, parent_id=1), menu(5)]

    assert ids(flatten_menu_tree(build_menu_tree(records))) == [1, 2, 3, 4, 5]


def test_node_dump_keeps_record_fields():
    forest = build_menu_tree([menu(1), menu(2, parent_id=1)])
    data = forest[0].model_dump()

    assert data["id"] == 1
    assert data["roles"] == ["admin"]
    assert data["createdAt"] == "2024-01-01 00:00:00"
    assert data["children"][0]["parentId"] == 1
    assert data["children"][0]["children"] == []
