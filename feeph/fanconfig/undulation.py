#!/usr/bin/env python3

import logging
import threading

import feeph.fanconfig.hwmon

LH = logging.getLogger('feeph.fanconfig')


class Undulator:
    """
    alternate a fan between standstill and full speed so the user can
    identify the physical fan belonging to a control file

    The thread owns the control file between 'start()' and 'stop()'.
    'stop()' only returns once the thread has terminated, no writes happen
    after that point.
    """

    def __init__(self, pwm_path: str, period: float):
        if period <= 0:
            raise ValueError(f"period must be positive (got {period})")
        self._pwm_path = pwm_path
        self._period = period
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, name=f'undulate {pwm_path}', daemon=True)

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        self.stop()

    def start(self):
        LH.info("Undulating fan for easier identification.")
        self._thread.start()

    def stop(self):
        self._stop_event.set()
        if self._thread.is_alive():
            self._thread.join()
        LH.debug("Stopped undulating '%s'.", self._pwm_path)

    def is_running(self) -> bool:
        return self._thread.is_alive()

    def _run(self):
        while True:
            for value in (0, 255):
                self._write(value)
                # returns early (True) as soon as stop() was called
                if self._stop_event.wait(self._period):
                    return

    def _write(self, value: int):
        # a failed write only affects the identification aid
        try:
            feeph.fanconfig.hwmon.write_pwm(self._pwm_path, value)
        except OSError as e:
            LH.debug("Unable to write %i to '%s': %s", value, self._pwm_path, e)
