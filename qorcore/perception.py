"""Camera driver and object detection stages of a perception pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CameraDriver:
    """Camera driver: read input, process it, write output.

    Every stage run is announced on stdout and recorded in ``stages``.
    """

    stages: list[str] = field(default_factory=list)

    def read_input(self) -> None:
        self.stages.append("read_input")
        print("read_input start")

    def process(self) -> None:
        self.stages.append("process")
        print("process start")

    def write_output(self) -> None:
        self.stages.append("write_output")
        print("write_output start")


@dataclass
class ObjectDetection:
    """Object detection: pre-processing, three drive quadrants, fusion.

    Every stage run is announced on stdout and recorded in ``stages``.
    """

    stages: list[str] = field(default_factory=list)

    def pre_processing(self) -> None:
        self.stages.append("PreProcessing")
        print("PreProcessing start")

    def drive_q1(self) -> None:
        self.stages.append("DriveQ1")
        print("DriveQ1 start")

    def drive_q2(self) -> None:
        self.stages.append("DriveQ2")
        print("DriveQ2 start")

    def drive_q3(self) -> None:
        self.stages.append("DriveQ3")
        print("DriveQ3 start")

    def object_fusion(self) -> None:
        self.stages.append("ObjectFusion")
        print("ObjectFusion start")