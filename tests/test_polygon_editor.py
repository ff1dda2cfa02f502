import pytest

from polycover.polygon_editor import (
    DEFAULT_ALTITUDE,
    LARGE_ALTITUDE_DELTA,
    NORMAL_ALTITUDE_DELTA,
    SMALL_ALTITUDE_DELTA,
    STATUS_INFO,
    PolygonEditor,
)


def _square_editor():
    editor = PolygonEditor()
    for x, y in [(0, 0), (10, 0), (10, 10), (0, 10)]:
        editor.create_vertex(x, y)
    return editor


def test_new_editor_has_empty_hull_selected():
    editor = PolygonEditor()
    assert editor.polygons == [[]]
    assert editor.polygon_selection == 0
    assert editor.vertex_selection == 0
    assert editor.altitude == DEFAULT_ALTITUDE


def test_create_vertex_inserts_before_selection():
    editor = PolygonEditor()
    editor.create_vertex(1, 2)
    editor.create_vertex(3, 4)
    # Each new vertex goes before the selected one and becomes selected.
    assert editor.hull == [(3.0, 4.0), (1.0, 2.0)]
    assert editor.vertex_selection == 0


def test_next_vertex_wraps_around():
    editor = _square_editor()
    seen = []
    for _ in range(len(editor.hull) + 1):
        seen.append(editor.vertex_selection)
        editor.next_vertex()
    assert seen[0] == seen[-1]
    assert sorted(seen[:-1]) == list(range(len(editor.hull)))


def test_next_vertex_on_empty_polygon_stays_at_start():
    editor = PolygonEditor()
    editor.next_vertex()
    assert editor.vertex_selection == 0


def test_delete_vertex_near_point():
    editor = _square_editor()
    before = list(editor.hull)
    editor.delete_vertex(10.2, 10.1)
    assert (10.0, 10.0) not in editor.hull
    assert len(editor.hull) == len(before) - 1
    assert 0 <= editor.vertex_selection < len(editor.hull)


def test_delete_vertex_far_away_changes_nothing():
    editor = _square_editor()
    before = list(editor.hull)
    editor.delete_vertex(5, 5)
    assert editor.hull == before


def test_delete_vertex_selects_polygon_of_deleted_vertex():
    editor = _square_editor()
    editor.add_hole()
    editor.create_vertex(3, 3)
    editor.create_vertex(4, 3)
    editor.create_vertex(4, 4)
    editor.next_polygon()
    assert editor.polygon_selection == 0
    editor.delete_vertex(4, 4)
    assert editor.polygon_selection == 1
    assert (4.0, 4.0) not in editor.polygons[1]


def test_delete_last_vertex_wraps_selection_to_start():
    editor = PolygonEditor()
    editor.create_vertex(0, 0)
    editor.create_vertex(5, 5)
    # hull is [(5,5), (0,0)]; delete the last one.
    editor.delete_vertex(0, 0)
    assert editor.hull == [(5.0, 5.0)]
    assert editor.vertex_selection == 0


def test_add_hole_selects_new_hole():
    editor = _square_editor()
    editor.add_hole()
    assert len(editor.polygons) == 2
    assert editor.polygon_selection == 1
    assert editor.holes == [[]]


def test_add_hole_twice_removes_empty_hole_first():
    editor = _square_editor()
    editor.add_hole()
    editor.add_hole()
    assert len(editor.polygons) == 2
    assert editor.polygon_selection == 1


def test_next_polygon_cycles():
    editor = _square_editor()
    editor.add_hole()
    editor.create_vertex(2, 2)
    editor.next_polygon()
    assert editor.polygon_selection == 0
    editor.next_polygon()
    assert editor.polygon_selection == 1
    assert editor.vertex_selection == 0


def test_reset_hull_clears_vertices():
    editor = _square_editor()
    editor.reset_polygon()
    assert editor.polygons == [[]]
    assert editor.polygon_selection == 0


def test_reset_hole_removes_it():
    editor = _square_editor()
    editor.add_hole()
    editor.create_vertex(2, 2)
    editor.reset_polygon()
    assert len(editor.polygons) == 1
    assert editor.polygon_selection == 0
    assert len(editor.hull) == 4


def test_remove_empty_holes_selects_last_polygon():
    editor = _square_editor()
    editor.add_hole()
    editor.create_vertex(2, 2)
    editor.polygons.append([])
    editor.polygon_selection = 0
    editor.remove_empty_holes()
    assert len(editor.polygons) == 2
    assert editor.polygon_selection == 1
    assert editor.vertex_selection == 0


def test_remove_empty_holes_without_empty_keeps_selection():
    editor = _square_editor()
    editor.vertex_selection = 2
    editor.remove_empty_holes()
    assert editor.polygon_selection == 0
    assert editor.vertex_selection == 2


def test_clear_all_restores_defaults():
    editor = _square_editor()
    editor.add_hole()
    editor.increase_altitude(False, True)
    editor.clear_all()
    assert editor.polygons == [[]]
    assert editor.polygon_selection == 0
    assert editor.altitude == DEFAULT_ALTITUDE


@pytest.mark.parametrize(
    "shift, control, delta",
    [
        (True, False, SMALL_ALTITUDE_DELTA),
        (False, True, LARGE_ALTITUDE_DELTA),
        (False, False, NORMAL_ALTITUDE_DELTA),
        (True, True, SMALL_ALTITUDE_DELTA),
    ],
)
def test_altitude_steps(shift, control, delta):
    editor = PolygonEditor()
    editor.increase_altitude(shift, control)
    assert editor.altitude - DEFAULT_ALTITUDE == pytest.approx(delta)
    editor.decrease_altitude(shift, control)
    assert editor.altitude == pytest.approx(DEFAULT_ALTITUDE)


def test_status_for_hull():
    editor = PolygonEditor()
    assert editor.status() == "Altitude: 3m, Current Selection:  Hull, " + STATUS_INFO


def test_status_for_hole():
    editor = _square_editor()
    editor.add_hole()
    assert " Hole 0, " in editor.status()
    assert editor.status().endswith(STATUS_INFO)


def test_status_info_mentions_keys():
    assert STATUS_INFO.startswith("<b>Left-Click:</b> Insert a new vertex")
    assert "<b>Enter:</b> Publish polygon" in STATUS_INFO