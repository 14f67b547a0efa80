from emctl.kinds import DEFAULT_API_VERSION
from emctl.observability import (
    ObservabilityMetrics,
    ObservabilityOutputServer,
    ObservabilityTracings,
    to_observability_metrics,
    to_observability_output_server,
    to_observability_tracings,
)


def test_metrics_round_trip_without_spec():
    result = to_observability_metrics("new", ObservabilityMetrics().to_v2alpha1())
    assert result.spec is None
    assert result.kind == "ObservabilityMetrics"
    assert result.name == "new"
    assert result.api_version == DEFAULT_API_VERSION


def test_tracings_round_trip_without_spec():
    result = to_observability_tracings("new", ObservabilityTracings().to_v2alpha1())
    assert result.spec is None
    assert result.kind == "ObservabilityTracings"
    assert result.name == "new"
    assert result.api_version == DEFAULT_API_VERSION


def test_output_server_round_trip_without_spec():
    result = to_observability_output_server("new", ObservabilityOutputServer().to_v2alpha1())
    assert result.spec is None
    assert result.kind == "ObservabilityOutputServer"
    assert result.name == "new"
    assert result.api_version == DEFAULT_API_VERSION


def test_metrics_round_trip_with_spec():
    spec = {"enabled": True, "sampleRate": 0.5}
    result = to_observability_metrics("svc", spec)
    assert result.to_v2alpha1() == spec
    assert isinstance(result, ObservabilityMetrics)


def test_tracings_round_trip_with_spec():
    spec = {"enabled": True, "sampleByQPS": 30}
    result = to_observability_tracings("svc", spec)
    assert result.to_v2alpha1() == spec
    assert isinstance(result, ObservabilityTracings)


def test_output_server_round_trip_with_spec():
    spec = {"enabled": False, "bootstrapServer": "kafka:9093"}
    result = to_observability_output_server("svc", spec)
    assert result.to_v2alpha1() == spec
    assert isinstance(result, ObservabilityOutputServer)


def test_metrics_dict_round_trip():
    result = to_observability_metrics("svc", {"md5Dictionary": {"enabled": False}})
    data = result.to_dict()
    assert data["kind"] == "ObservabilityMetrics"
    assert data["metadata"] == {"name": "svc"}
    assert ObservabilityMetrics.from_dict(data) == result


def test_tracings_dict_round_trip():
    result = to_observability_tracings("svc", {"output": {"enabled": True}})
    data = result.to_dict()
    assert data["kind"] == "ObservabilityTracings"
    assert data["metadata"] == {"name": "svc"}
    assert ObservabilityTracings.from_dict(data) == result


def test_output_server_dict_round_trip():
    result = to_observability_output_server("svc", {"timeout": 30000})
    data = result.to_dict()
    assert data["kind"] == "ObservabilityOutputServer"
    assert data["metadata"] == {"name": "svc"}
    assert ObservabilityOutputServer.from_dict(data) == result