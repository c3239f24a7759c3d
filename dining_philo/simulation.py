"""Threaded dining philosophers simulation."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from dining_philo.config import Settings

_MONITOR_INTERVAL = 0.0005
_ODD_START_DELAY = 0.001


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


class Philosopher:
    """One philosopher seated between two forks."""

    def __init__(
        self,
        simulation: Simulation,
        ident: int,
        left_fork: int,
        right_fork: int,
    ) -> None:
        self.simulation = simulation
        self.ident = ident
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.last_meal = simulation.start_time
        self.meals_eaten = 0
        self.lock = threading.Lock()

    @property
    def _fork_order(self) -> tuple[int, int]:
        return (
            min(self.left_fork, self.right_fork),
            max(self.left_fork, self.right_fork),
        )

    def mark_meal(self, timestamp: int | None = None) -> None:
        """Record the start of a meal."""
        with self.lock:
            self.last_meal = now_ms() if timestamp is None else timestamp

    def take_forks(self) -> bool:
        """Pick up both forks, lower index first.

        Returns ``True`` when both forks are held. If the simulation stops
        meanwhile, any fork taken is put back and ``False`` is returned.
        """
        sim = self.simulation
        first, second = (sim.forks[i] for i in self._fork_order)
        first.acquire()
        if sim.is_stopped():
            first.release()
            return False
        sim.report(self.ident, "has taken a fork")
        second.acquire()
        if sim.is_stopped():
            second.release()
            first.release()
            return False
        sim.report(self.ident, "has taken a fork")
        return True

    def eat(self) -> None:
        """Eat for the configured time and count the meal."""
        sim = self.simulation
        self.mark_meal()
        sim.report(self.ident, "is eating")
        sim.sleep_ms(sim.settings.time_to_eat)
        with self.lock:
            self.meals_eaten += 1

    def put_down_forks(self) -> None:
        """Release both forks, in reverse order of taking them."""
        first, second = self._fork_order
        self.simulation.forks[second].release()
        self.simulation.forks[first].release()

    def sleep(self) -> None:
        """Sleep for the configured time."""
        sim = self.simulation
        sim.report(self.ident, "is sleeping")
        sim.sleep_ms(sim.settings.time_to_sleep)

    def think(self) -> None:
        """Announce thinking."""
        self.simulation.report(self.ident, "is thinking")

    def run(self) -> None:
        """Thread body: wait for the start signal, then eat, sleep and think."""
        sim = self.simulation
        try:
            sim._barrier.wait()
        except threading.BrokenBarrierError:
            return
        self.mark_meal()
        if self.ident % 2:
            time.sleep(_ODD_START_DELAY)
        while not sim.is_stopped():
            if not self.take_forks():
                break
            self.eat()
            self.put_down_forks()
            if sim.is_stopped():
                break
            self.sleep()
            if sim.is_stopped():
                break
            self.think()


class Simulation:
    """A table of philosophers, their forks and the monitor watching them."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out
        self.start_time = now_ms()
        self._stop_event = threading.Event()
        self._print_lock = threading.Lock()
        count = settings.philosophers
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(self, i + 1, i, (i + 1) % count) for i in range(count)
        ]
        self._barrier = threading.Barrier(count + 1, action=self._begin)

    def _begin(self) -> None:
        self.start_time = now_ms()
        for philosopher in self.philosophers:
            philosopher.mark_meal(self.start_time)

    def _write(self, line: str) -> None:
        out = self.out if self.out is not None else sys.stdout
        out.write(line + "\n")
        out.flush()

    def stop(self) -> None:
        """Signal every thread that the simulation is over."""
        self._stop_event.set()

    def is_stopped(self) -> bool:
        """Whether the simulation has been stopped."""
        return self._stop_event.is_set()

    def report(self, philosopher_id: int, status: str, force: bool = False) -> None:
        """Print a timestamped status line unless stopped (or ``force``)."""
        with self._print_lock:
            if force or not self.is_stopped():
                self._write(f"{now_ms() - self.start_time} {philosopher_id} {status}")

    def sleep_ms(self, duration: int) -> None:
        """Sleep ``duration`` milliseconds, waking early if stopped."""
        self._stop_event.wait(max(duration, 0) / 1000)

    def _philosopher_died(self, philosopher: Philosopher) -> bool:
        now = now_ms()
        with philosopher.lock:
            dead = now - philosopher.last_meal >= self.settings.time_to_die
        if dead:
            self.stop()
            self.report(philosopher.ident, "died", force=True)
        return dead

    def _all_fed(self) -> bool:
        meals = self.settings.meals
        if meals is None:
            return False
        for philosopher in self.philosophers:
            with philosopher.lock:
                if philosopher.meals_eaten < meals:
                    return False
        self.stop()
        with self._print_lock:
            self._write("ALL MEALS HAVE BEEN EATEN")
        return True

    def _monitor(self) -> None:
        while True:
            if any(self._philosopher_died(p) for p in self.philosophers):
                return
            if self._all_fed():
                return
            time.sleep(_MONITOR_INTERVAL)

    def _run_alone(self) -> None:
        fork = self.forks[0]
        with fork:
            self.report(1, "has taken a fork")
            time.sleep(self.settings.time_to_die / 1000)
            with self._print_lock:
                self._write(f"{now_ms() - self.start_time} 1 died")

    def run(self) -> None:
        """Run the simulation until someone dies or everyone has eaten."""
        if self.settings.philosophers == 1:
            self._run_alone()
            return
        threads: list[threading.Thread] = []
        try:
            for philosopher in self.philosophers:
                thread = threading.Thread(
                    target=philosopher.run,
                    name=f"philosopher-{philosopher.ident}",
                    daemon=True,
                )
                thread.start()
                threads.append(thread)
        except RuntimeError:
            self.stop()
            self._barrier.abort()
            for thread in threads:
                thread.join()
            raise
        self._barrier.wait()
        try:
            self._monitor()
        finally:
            self.stop()
            for thread in threads:
                thread.join()