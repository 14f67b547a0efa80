# emctl

Building blocks for working with EaseMesh resources from Python:

- `emctl.meta`: the header every resource carries (`VersionKind`,
  `MetaData`, `MeshResource`) and the `TableObject` interface for
  resources that add their own table columns;
- a model of the mesh resource kinds, with conversions to and from their
  `v2alpha1` form:
  - `emctl.services`: `Service`, `ServiceCanary`, `ServiceInstance`, `Tenant`
  - `emctl.policies`: `LoadBalance`, `Mock`, `Resilience`
  - `emctl.traffic`: `HTTPRouteGroup`, `Ingress`, `TrafficTarget`
  - `emctl.observability`: `ObservabilityMetrics`, `ObservabilityTracings`,
    `ObservabilityOutputServer`
  - `emctl.meshcontroller`: `MeshController` and its admin settings
  - `emctl.custom`: `CustomResourceKind` and `CustomResource`
- `emctl.kinds`: the kind names, defaults and `new_mesh_resource`;
- `emctl.creator.ObjectCreator`, which builds the right resource object for a kind;
- `emctl.printer`, which renders resources as a table, YAML or JSON;
- `emctl.rcfile`, the `~/.emctlrc` settings file;
- `emctl.installation`, a staged-installation runner with clean-up on failure;
- `emctl.jsontool.trim_null`, which strips `null` values out of JSON documents.

## Installation

```
pip install .
```

The only runtime dependency is PyYAML. Install the `test` extra to run
the tests with pytest.

## Resources

Every resource is a dataclass with `version_kind` and `metadata`, and
exposes `name`, `kind`, `api_version` and `labels`. `to_dict()` gives the
resource as it appears in a YAML document; `from_dict()` builds it back.

```python
from emctl.creator import ObjectCreator
from emctl.meta import VersionKind

service = ObjectCreator().new_from_kind(VersionKind(kind="Service"))
print(service.kind, service.api_version)   # Service mesh.megaease.com/v2alpha1
```

Kinds without a class of their own come back as a `CustomResource`. When
no API version is given, `mesh.megaease.com/v2alpha1` is used.
`new_from_resource` does the same but keeps the given resource's name.

Each kind converts to its `v2alpha1` form with `to_v2alpha1()` and back
with the module-level `to_*` functions, for example
`emctl.services.to_service(service_dict)` or
`emctl.policies.to_load_balance(name, load_balance_dict)`. The `v2alpha1`
forms are plain dictionaries, except for the mesh controller, which uses
`MeshControllerV2Alpha1`.

Service instances are named `serviceName/instanceID`;
`ServiceInstance.parse_name()` returns the two parts and raises
`ValueError` for any other shape.

`emctl.custom.to_dynamic_object` copies a parsed YAML mapping and checks
that every nested key is a string, raising `TypeError` otherwise.

## Printing

```python
from emctl.printer import Printer

Printer("table").print_objects([service])
text = Printer("yaml").render([service])
```

Supported formats are `table`, `yaml` and `json`; any other format raises
`UnsupportedFormatError`. An empty list renders as `No resource`. Tables
have the columns KIND, NAME and LABELS, followed by the extra columns of
the first resource that defines its own. `print_objects` writes to the
printer's `stream`, or standard output when none is set. The functions
`render_table`, `render_yaml` and `render_json` are also available
directly.

## Settings file

```python
from emctl.rcfile import default_rcfile

rc = default_rcfile()          # ~/.emctlrc
rc.server = "127.0.0.1:2381"
rc.save()
rc.load()
```

Reading or writing problems raise `RCFileError`.

## Staged installation

```python
from emctl.installation import Installation, StageContext, wrap

def describe(context, phase):
    return "example stage"

stage = wrap(None, lambda ctx: None, lambda ctx: None, describe)
installation = Installation(stage)
context = StageContext()
try:
    installation.do_install_stage(context)
except Exception:
    installation.clear_resource(context)
    raise
```

Each stage writes its begin description, runs its pre-check and its
install step, registers its clean-up step on the context (also when the
install step fails) and hands over to the next stage. A failing pre-check
or install step raises `InstallError`. `clear_resource` runs every
registered clean-up step and writes the errors they raise to standard
error instead of raising them. Progress text goes to the context's `out`
stream, or standard output when none is set.

## JSON null trimming

```python
from emctl.jsontool import trim_null

trim_null(b'{"a":2,"c":null,"e":[1,null,4]}')
# b'{"a":2,"e":[1,4]}'
```

Object keys come out sorted. `None` or invalid JSON raises `ValueError`.

## What this package does not do

There is no command-line program here. The package does not talk to a
mesh control plane or a Kubernetes cluster: it cannot apply, get or
delete resources on a server, and it holds no installation stages that
deploy mesh components. It provides the resource model, printing,
settings file and stage runner that such tools are built from.