import logging
import time
import mlflow

log = logging.getLogger("mlflow")


def setup_mlflow(tracking_uri: str, experiment: str):
    mlflow.set_tracking_uri(tracking_uri)
    mlflow.set_experiment(experiment)


class Timer:
    def __enter__(self):
        self.t0 = time.perf_counter()
        self.dt = 0.0
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dt = time.perf_counter() - self.t0


class MlflowIngestTracker:
    """Records one MLflow run per stored upload."""

    def __init__(self, collection: str, chunk_size: int, chunk_overlap: int):
        self.collection = collection
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    def __call__(self, *, filename: str, num_chunks: int, elapsed: float) -> None:
        with mlflow.start_run(run_name=f"ingest:{filename}"):
            mlflow.log_params({
                "filename": filename,
                "chunk_size": self.chunk_size,
                "chunk_overlap": self.chunk_overlap,
                "collection": self.collection,
            })
            mlflow.log_metrics({
                "num_chunks": num_chunks,
                "ingest_seconds": elapsed,
            })
        log.info("logged ingest run filename=%s chunks=%s", filename, num_chunks)
