# src/brcm_firmware/services.py

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from .device_config import DEFAULT_INF_NAME, INJECTOR_VARIANTS, InjectorVariant
from .emitters import IndexEmitter, InjectorEmitter, ManifestEmitter
from .models import Device, PackagedFirmware
from .packager import FirmwarePackager
from .registry import parse_inf


@dataclass
class PipelineResult:
    devices: List[Device]
    packaged: List[PackagedFirmware]
    written: List[Path] = field(default_factory=list)
    manifest_path: Optional[Path] = None


class FirmwarePipeline:
    def __init__(
        self,
        input_dir,
        output_dir,
        inf_name: str = DEFAULT_INF_NAME,
        injector_variants: Sequence[InjectorVariant] = tuple(INJECTOR_VARIANTS.values()),
        write_index: bool = True,
        quiet: bool = False,
    ):
        self.input_dir = Path(input_dir).expanduser().resolve()
        self.output_dir = Path(output_dir).expanduser().resolve()
        self.inf_name = inf_name
        self.injector_variants = list(injector_variants)
        self.write_index = write_index
        self.quiet = quiet

    @property
    def inf_path(self) -> Path:
        return self.input_dir / self.inf_name

    def load_devices(self) -> List[Device]:
        return parse_inf(self.inf_path)

    def run(self) -> PipelineResult:
        devices = self.load_devices()
        packaged = FirmwarePackager(
            devices, self.input_dir, self.output_dir, quiet=self.quiet
        ).run()
        result = PipelineResult(devices=devices, packaged=packaged)

        if self.injector_variants:
            result.written.extend(
                InjectorEmitter(packaged, self.injector_variants, quiet=self.quiet).emit()
            )
        manifest = ManifestEmitter(devices, self.output_dir, quiet=self.quiet)
        result.written.extend(manifest.emit())
        result.manifest_path = manifest.path
        if self.write_index:
            result.written.extend(IndexEmitter(devices, self.output_dir, quiet=self.quiet).emit())
        return result
