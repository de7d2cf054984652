import pytest

from qorcore.perception import CameraDriver, ObjectDetection


@pytest.mark.parametrize(
    ("method", "expected"),
    [
        ("read_input", "read_input start\n"),
        ("process", "process start\n"),
        ("write_output", "write_output start\n"),
    ],
)
def test_camera_driver_stages(method, expected, capsys):
    result = getattr(CameraDriver(), method)()
    assert capsys.readouterr().out == expected
    assert result is None


@pytest.mark.parametrize(
    ("method", "expected"),
    [
        ("pre_processing", "PreProcessing start\n"),
        ("drive_q1", "DriveQ1 start\n"),
        ("drive_q2", "DriveQ2 start\n"),
        ("drive_q3", "DriveQ3 start\n"),
        ("object_fusion", "ObjectFusion start\n"),
    ],
)
def test_object_detection_stages(method, expected, capsys):
    result = getattr(ObjectDetection(), method)()
    assert capsys.readouterr().out == expected
    assert result is None


def test_full_pipeline_order(capsys):
    camera = CameraDriver()
    detection = ObjectDetection()
    camera.read_input()
    camera.process()
    camera.write_output()
    detection.pre_processing()
    detection.drive_q1()
    detection.drive_q2()
    detection.drive_q3()
    detection.object_fusion()
    assert capsys.readouterr().out.splitlines() == [
        "read_input start",
        "process start",
        "write_output start",
        "PreProcessing start",
        "DriveQ1 start",
        "DriveQ2 start",
        "DriveQ3 start",
        "ObjectFusion start",
    ]