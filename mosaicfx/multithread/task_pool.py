# mosaicfx/multithread/task_pool.py
# ---------------------------------------------------------------
# Простой пул задач на основе concurrent.futures.
# NumpyBackend режет кадр на полосы строк и считает их параллельно
# (numpy отпускает GIL внутри векторных операций).
# ---------------------------------------------------------------

from concurrent.futures import ThreadPoolExecutor
import os
import queue


def split_rows(height, parts):
    """Делит [0, height) на ``parts`` непрерывных полос (y0, y1)."""
    parts = max(1, min(parts, height))
    step, rest = divmod(height, parts)
    bands = []
    y0 = 0
    for i in range(parts):
        y1 = y0 + step + (1 if i < rest else 0)
        bands.append((y0, y1))
        y0 = y1
    return bands


class TaskPool:
    """Пул готового количества потоков; задачи принимаются как callables."""
    def __init__(self, max_workers=None):
        self.max_workers = max_workers or os.cpu_count() or 1
        self.executor = ThreadPoolExecutor(max_workers=self.max_workers,
                                           thread_name_prefix="mosaicfx")
        self.tasks = queue.Queue()
        self._shutdown = False

    def submit(self, fn, *args, **kwargs):
        """Отправить задачу в пул, вернуть Future."""
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        future = self.executor.submit(fn, *args, **kwargs)
        self.tasks.put(future)
        return future

    def wait_all(self):
        """Блокировать до завершения всех поставленных задач, вернуть их результаты."""
        results = []
        while not self.tasks.empty():
            future = self.tasks.get()
            results.append(future.result())  # пробрасывает исключения, если они возникли
        return results

    def gather(self, fn, arg_list):
        """
        Выполнить ``fn(*args)`` для каждого набора аргументов и дождаться
        именно этих задач.  Общая очередь ``wait_all`` не используется,
        поэтому вызовы из разных потоков не забирают чужие Future.
        """
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        futures = [self.executor.submit(fn, *args) for args in arg_list]
        return [future.result() for future in futures]

    def shutdown(self, wait=True):
        self._shutdown = True
        self.executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
