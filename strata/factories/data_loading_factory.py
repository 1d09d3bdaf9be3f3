from __future__ import annotations

from dataclasses import dataclass

from strata.contracts.run_config import DataModel
from strata.components.interfaces import DataLoader
from strata.io.datasets import Dataset, load_dataset


@dataclass
class ConfigDataLoader(DataLoader):
    cfg: DataModel

    def load(self) -> Dataset:
        return load_dataset(self.cfg)


def make_data_loader(cfg: DataModel) -> DataLoader:
    return ConfigDataLoader(cfg=cfg)
