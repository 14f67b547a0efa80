import pytest

from emctl.meta import MeshResource, MetaData, TableColumn, TableObject, VersionKind


def test_meta_accessors():
    resource = MeshResource(
        VersionKind(api_version="mesh.megaease.com/v2alpha1", kind="Tenant"),
        MetaData(name="pet", labels=None),
    )
    assert resource.kind == "Tenant"
    assert resource.api_version == "mesh.megaease.com/v2alpha1"
    assert resource.name == "pet"
    assert resource.labels is None


def test_to_dict_omits_empty_labels():
    resource = MeshResource(VersionKind("v1", "Service"), MetaData("svc"))
    assert resource.to_dict() == {
        "apiVersion": "v1",
        "kind": "Service",
        "metadata": {"name": "svc"},
    }


def test_to_dict_includes_labels():
    resource = MeshResource(VersionKind("v1", "Service"), MetaData("svc", {"a": "b"}))
    assert resource.to_dict()["metadata"] == {"name": "svc", "labels": {"a": "b"}}


def test_from_dict_round_trip():
    resource = MeshResource(VersionKind("v1", "Tenant"), MetaData("t1", {"x": "y"}))
    assert MeshResource.from_dict(resource.to_dict()) == resource


def test_defaults_are_empty():
    resource = MeshResource()
    assert (resource.name, resource.kind, resource.api_version) == ("", "", "")


def test_table_object_is_abstract():
    with pytest.raises(TypeError):
        TableObject()


def test_table_object_subclass_columns():
    class Row(TableObject):
        def columns(self):
            return [TableColumn("Policy", "roundRobin")]

    assert Row().columns() == [TableColumn(name="Policy", value="roundRobin")]