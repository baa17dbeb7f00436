from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from types import ModuleType
from typing import Optional

from fastapi import APIRouter

router = APIRouter()


def _load_module(module_path: Path) -> Optional[ModuleType]:
    spec = spec_from_file_location(module_path.stem.replace(".", "_"), module_path)
    if spec is None or spec.loader is None:
        return None
    module = module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


v1_dir = Path(__file__).resolve().parent

# 파일명이 점을 포함하므로 (*.router.py) import 대신 경로로 로드
for router_file in sorted(v1_dir.glob("*.router.py")):
    module = _load_module(router_file)
    if module is None:
        continue

    sub_router = getattr(module, "router", None)
    if isinstance(sub_router, APIRouter):
        router.include_router(sub_router)
