from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GeneratorConfig:
    """Where to read the catalog, where to write the two type modules, how to format them."""

    catalog_path: Path = Path("generated") / "endpoints.json"
    output_dir: Path = Path("src") / "generated"
    method_types_filename: str = "method-types.ts"
    parameters_filename: str = "parameters-and-response-types.ts"

    # module the emitted files import Endpoints/RequestParameters/... from
    types_package: str = "@octokit/types"
    # "<prefix>.<scope>.<id>()" in deprecation notes
    identifier_prefix: str = "octokit.rest"
    formatter: str = "builtin"

    def resolve(self, root: Path | None = None) -> "GeneratorConfig":
        root = (root or Path.cwd()).resolve()
        return dataclasses.replace(
            self,
            catalog_path=root / self.catalog_path,
            output_dir=root / self.output_dir,
        )

    @property
    def method_types_path(self) -> Path:
        return self.output_dir / self.method_types_filename

    @property
    def parameters_path(self) -> Path:
        return self.output_dir / self.parameters_filename

    @property
    def parameters_module(self) -> str:
        # relative ESM import of the parameters file from the method-types file
        stem = self.parameters_filename.rsplit(".", 1)[0]
        return f"./{stem}.js"
