import pytest

from rectscan_core.geometry import BoundingRect, Point2D
from rectscan_io.schemas import (
    InputDocument,
    IntersectionReport,
    ObjectArea,
    ObjectIntersection,
    SceneObject,
    rect_to_dict,
)


def test_scene_object_from_dict_with_defaults():
    obj = SceneObject.from_dict({"name": "table", "width": 4, "height": 4, "x": 1, "y": 1})

    assert obj.name == "table"
    assert (obj.x, obj.y, obj.width, obj.height) == (1.0, 1.0, 4.0, 4.0)
    assert obj.properties == []


def test_scene_object_keeps_opaque_properties():
    obj = SceneObject.from_dict(
        {
            "name": "lamp",
            "width": 1,
            "height": 2,
            "x": 0,
            "y": 0,
            "properties": [{"color": "red"}, 3, None],
        }
    )
    assert obj.properties == [{"color": "red"}, 3, None]


def test_scene_object_area_is_canonical():
    area = SceneObject(name="a", width=-2.0, height=3.0, x=5.0, y=1.0).area()

    assert area == ObjectArea(
        name="a",
        area=BoundingRect(from_point=Point2D(3.0, 1.0), to_point=Point2D(5.0, 4.0)),
    )
    assert area.bounding_rect() is area.area


@pytest.mark.parametrize(
    "data, fragment",
    [
        ({"width": 1, "height": 1, "x": 0, "y": 0}, "Missing required SceneObject field"),
        ({"name": "a", "height": 1, "x": 0, "y": 0}, "'width'"),
        ({"name": 7, "width": 1, "height": 1, "x": 0, "y": 0}, "'name' must be a string"),
        ({"name": "a", "width": "1", "height": 1, "x": 0, "y": 0}, "'width' must be a number"),
        ({"name": "a", "width": 1, "height": True, "x": 0, "y": 0}, "'height' must be a number"),
        ({"name": "a", "width": 1, "height": 1, "x": 0, "y": 0, "properties": {}}, "'properties'"),
        (["a", 1, 1, 0, 0], "must be a JSON object"),
    ],
)
def test_scene_object_rejects_bad_data(data, fragment):
    with pytest.raises(ValueError) as excinfo:
        SceneObject.from_dict(data)
    assert fragment in str(excinfo.value)


def test_input_document_from_dict():
    doc = InputDocument.from_dict(
        {
            "objects": [
                {"name": "a", "width": 1, "height": 1, "x": 0, "y": 0},
                {"name": "b", "width": 2, "height": 2, "x": 1, "y": 1},
            ]
        }
    )
    assert [obj.name for obj in doc.objects] == ["a", "b"]
    assert doc.object_count == 2


def test_input_document_reports_offending_index():
    with pytest.raises(ValueError, match=r"objects\[1\]"):
        InputDocument.from_dict(
            {"objects": [{"name": "a", "width": 1, "height": 1, "x": 0, "y": 0}, {"name": "b"}]}
        )


@pytest.mark.parametrize(
    "data",
    [{}, {"objects": {}}, [], "objects"],
    ids=["missing objects", "objects not a list", "root is list", "root is string"],
)
def test_input_document_rejects_bad_structure(data):
    with pytest.raises(ValueError):
        InputDocument.from_dict(data)


def test_report_to_dict():
    area_a = BoundingRect.from_xywh(1, 1, 4, 4)
    area_b = BoundingRect.from_xywh(2, 2, 1, 1)
    report = IntersectionReport(
        areas=[ObjectArea("a", area_a), ObjectArea("b", area_b)],
        intersections=[ObjectIntersection(names=("a", "b"), area=area_b)],
    )

    assert report.to_dict() == {
        "areas": [
            {"name": "a", "area": {"from": {"x": 1, "y": 1}, "to": {"x": 5, "y": 5}}},
            {"name": "b", "area": {"from": {"x": 2, "y": 2}, "to": {"x": 3, "y": 3}}},
        ],
        "intersections": [
            {"names": ["a", "b"], "area": {"from": {"x": 2, "y": 2}, "to": {"x": 3, "y": 3}}},
        ],
    }
    assert report.intersection_count == 1


def test_rect_to_dict_uses_from_and_to_keys():
    assert rect_to_dict(BoundingRect.from_xywh(0.5, 1.5, 1, 1)) == {
        "from": {"x": 0.5, "y": 1.5},
        "to": {"x": 1.5, "y": 2.5},
    }
