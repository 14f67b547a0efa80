import io
import json

import pytest
import yaml

from emctl.creator import ObjectCreator
from emctl.kinds import (
    DEFAULT_API_VERSION,
    KIND_CUSTOM_RESOURCE_KIND,
    KIND_HTTP_ROUTE_GROUP,
    KIND_INGRESS,
    KIND_LOAD_BALANCE,
    KIND_MESH_CONTROLLER,
    KIND_MOCK,
    KIND_OBSERVABILITY_METRICS,
    KIND_OBSERVABILITY_OUTPUT_SERVER,
    KIND_OBSERVABILITY_TRACINGS,
    KIND_RESILIENCE,
    KIND_SERVICE,
    KIND_SERVICE_CANARY,
    KIND_SERVICE_INSTANCE,
    KIND_TENANT,
    KIND_TRAFFIC_TARGET,
    new_mesh_resource,
)
from emctl.printer import (
    Printer,
    UnsupportedFormatError,
    render_json,
    render_table,
    render_yaml,
)
from emctl.services import Service, ServiceSpec

ALL_KINDS = [
    KIND_CUSTOM_RESOURCE_KIND,
    KIND_HTTP_ROUTE_GROUP,
    KIND_INGRESS,
    KIND_LOAD_BALANCE,
    KIND_MESH_CONTROLLER,
    KIND_MOCK,
    KIND_OBSERVABILITY_METRICS,
    KIND_OBSERVABILITY_OUTPUT_SERVER,
    KIND_OBSERVABILITY_TRACINGS,
    KIND_RESILIENCE,
    KIND_SERVICE,
    KIND_SERVICE_CANARY,
    KIND_SERVICE_INSTANCE,
    KIND_TENANT,
    KIND_TRAFFIC_TARGET,
    "CustomResource",
]


def _make(kind, name="obj"):
    return ObjectCreator().new_from_resource(new_mesh_resource(DEFAULT_API_VERSION, kind, name))


def _service():
    svc = _make(KIND_SERVICE, "svc")
    svc.spec = ServiceSpec(register_tenant="t1")
    svc.metadata.labels = {"b": "2", "a": "1"}
    return svc


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_every_kind_prints_in_every_format(kind):
    obj = _make(kind)
    out = io.StringIO()
    for fmt in ("yaml", "json", "table"):
        Printer(fmt, out).print_objects([obj])
    text = out.getvalue()
    assert text.count(kind) >= 3
    assert "obj" in text


def test_yaml_round_trip():
    svc = _service()
    assert yaml.safe_load(render_yaml([svc])) == [svc.to_dict()]


def test_json_round_trip_and_indent():
    svc = _service()
    text = render_json([svc])
    assert json.loads(text) == [svc.to_dict()]
    assert text.endswith("\n")
    assert '\n  {' in text


def test_table_header_and_row():
    lines = render_table([_service()]).splitlines()
    assert lines[0].split() == ["KIND", "NAME", "LABELS", "TENANT"]
    assert lines[1].split() == ["Service", "svc", "a=1,b=2", "t1"]


def test_table_columns_are_aligned():
    first = _service()
    second = Service(
        version_kind=first.version_kind,
        metadata=type(first.metadata)(name="a-much-longer-name", labels={"x": "y"}),
        spec=ServiceSpec(register_tenant="t2"),
    )
    lines = render_table([first, second]).splitlines()
    assert lines[1].index("a=1,b=2") == lines[2].index("x=y") == lines[0].index("LABELS")


def test_table_object_without_columns_pads_row():
    svc = _service()
    plain = Service(version_kind=svc.version_kind, metadata=type(svc.metadata)(name="bare", labels={"k": "v"}))
    lines = render_table([svc, plain]).splitlines()
    assert lines[2].split() == ["Service", "bare", "k=v"]


def test_empty_objects_print_no_resource():
    out = io.StringIO()
    Printer("bogus", out).print_objects([])
    assert out.getvalue() == "No resource\n"


def test_unsupported_format_raises():
    with pytest.raises(UnsupportedFormatError, match="unsupported output format: xml"):
        Printer("xml").render([_service()])


def test_print_objects_defaults_to_stdout(capsys):
    Printer("yaml").print_objects([_service()])
    assert yaml.safe_load(capsys.readouterr().out)[0]["metadata"]["name"] == "svc"