"""
Loading conversion tables from CSV files.

Each property is one CSV file named after the property (``length.csv``) whose
first five columns are ``unit_from, label_from, unit_to, label_to, factor``
after a header row.
"""
import logging
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from unit_graph.errors import LoaderError
from unit_graph.graph.builder import RECORD_FIELDS, build_graph, normalize_record
from unit_graph.graph.unit_graph import UnitGraph
from unit_graph.schema.unit import ConversionRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def default_graphs_folder() -> Path:
    """Folder holding the conversion tables shipped with the package."""
    return Path(__file__).resolve().parent.parent / "data" / "graphs"


def graph_names_from_folder(folder: PathLike) -> List[str]:
    """
    List the property tables in a folder.

    Args:
        folder: Folder containing ``<property>.csv`` files

    Returns:
        Sorted property names
    """
    folder = Path(folder)
    if not folder.is_dir():
        raise LoaderError(f"Folder does not exist: {folder}", context={"folder": str(folder)})
    names = sorted(path.stem for path in folder.glob("*.csv") if path.is_file())
    if not names:
        raise LoaderError(f"No files found in folder: {folder}", context={"folder": str(folder)})
    return names


def load_records(path: PathLike, encoding: str = "utf-8") -> List[ConversionRecord]:
    """
    Read the conversion records of one table.

    Args:
        path: CSV file path
        encoding: File encoding

    Returns:
        Validated records, in file order
    """
    path = Path(path)
    if not path.is_file():
        raise LoaderError(f"File does not exist: {path}", context={"path": str(path)})
    try:
        frame = pd.read_csv(
            path,
            encoding=encoding,
            skipinitialspace=True,
            keep_default_na=False,
            na_values=[""],
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise LoaderError(f"Could not read conversion table {path}: {exc}") from exc

    if frame.shape[1] < len(RECORD_FIELDS):
        raise LoaderError(
            f"Conversion table {path} needs {len(RECORD_FIELDS)} columns "
            f"({', '.join(RECORD_FIELDS)}), found {frame.shape[1]}",
            context={"path": str(path)},
        )

    frame = frame.iloc[:, : len(RECORD_FIELDS)]
    frame.columns = list(RECORD_FIELDS)
    frame = frame.dropna(how="all")
    records = [normalize_record(row) for row in frame.to_dict(orient="records")]
    logger.debug("Read %d records from %s", len(records), path)
    return records


def load_graph(path: PathLike, encoding: str = "utf-8") -> UnitGraph:
    """Build the graph of one table, named after the file stem."""
    path = Path(path)
    return build_graph(load_records(path, encoding=encoding), name=path.stem)


def load_folder(folder: PathLike, encoding: str = "utf-8") -> Dict[str, UnitGraph]:
    """
    Build one graph per table in a folder.

    Returns:
        Mapping of property name to graph, connectivity not yet checked
    """
    folder = Path(folder)
    graphs = {}
    for name in graph_names_from_folder(folder):
        graphs[name] = load_graph(folder / f"{name}.csv", encoding=encoding)
    return graphs
