from mosaicfx.multithread.task_pool import TaskPool, split_rows

__all__ = ["TaskPool", "split_rows"]
