"""Model artifact writing.

The training job persists the installed model as a `.joblib` file holding the
fitted scikit-learn estimator, plus a `.json` metadata file. The metadata
records `feature_cols` so anything loading the artifact later can build
vectors in the same order the model was trained on.
"""

import json
import os

import joblib

from .inference import InstalledModel


def artifact_paths(artifact_dir: str, model_name: str) -> tuple[str, str]:
    """Return the (joblib, json) paths for `model_name` inside `artifact_dir`."""
    base = os.path.join(artifact_dir, model_name)
    return f"{base}.joblib", f"{base}.json"


def save_artifact(installed: InstalledModel, artifact_dir: str, model_name: str) -> dict:
    """Write the installed model and its metadata to `artifact_dir`.

    Args:
        installed: Model snapshot taken from the classifier holder.
        artifact_dir: Output directory; created if missing.
        model_name: Base file name for the artifact pair.

    Returns:
        dict: The metadata written to the JSON file.
    """
    os.makedirs(artifact_dir, exist_ok=True)
    artifact_path, meta_path = artifact_paths(artifact_dir, model_name)

    joblib.dump(installed.model.estimator, artifact_path)

    meta = {
        "model_name": model_name,
        **installed.model.metadata(),
        "generation": installed.generation,
        "artifact_path": artifact_path,
    }
    with open(meta_path, "w") as f:
        json.dump(meta, f, indent=2)

    return meta
