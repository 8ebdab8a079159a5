# vivotk

Building blocks for streaming and playing back volumetric (point cloud) video.
The package uses only the Python standard library.

## What is in the package

- `vivotk.predictors`: throughput predictors and a quality model.
  - `LastValue` predicts the last value it was given.
  - `SimpleRunningAverage(size=3)` averages the last `size` samples and
    ignores samples equal to zero.
  - `ExponentialMovingAverage(alpha)` is a moving average with a fixed alpha.
  - `GAEMA(alpha)` is a gradient adaptive exponential moving average.
  - `LPEMA(alpha)` is a low pass exponential moving average.

  Each predictor takes samples through `add(value)` and returns its estimate
  from `predict()`. Before the first sample, `predict()` returns `None`.
  `predict_quality(geo_qp, attr_qp)` estimates the quality of an encoded
  point cloud from its geometry and attribute quantisation parameters.
- `vivotk.velodyne`: Velodyne `.bin` files. Each file is a run of 16-byte
  records, each holding `x`, `y`, `z` and `intensity` as 32-bit floats in
  native byte order. `read_velodyne_bin_file(path)` returns a
  `VelodyneBinData` made of `VelodynePoint`s and ignores a trailing partial
  record. An intensity above 1 is divided by 255. An intensity outside
  0..255, or a file that cannot be read, raises `VelodyneBinReadError`.
  `write_velodyne_bin_file(data, path)` writes the records back.
  `VelodynePoint.from_bytes` and `VelodynePoint.to_bytes` convert a single
  record.
- `vivotk.upsample`: `PointXyzRgba`, `PointCloud` and
  `upsample(point_cloud, factor)`. For every pair of points whose squared
  distance is at most `18 * factor`, `upsample` adds `2 * factor` points
  along the line between them, with interpolated colours. The original
  points follow the new ones. With a factor of 1 or less, the cloud is
  returned unchanged.
- `vivotk.files`:
  - `expand_directory(path)` lists the regular, non-hidden files directly
    inside a directory, sorted. It does not search subdirectories.
  - `find_all_files(paths)` expands directories and keeps plain files. It
    prints each missing path and then raises `FileNotFoundError`.
  - `ConvertOutputFormat` has the members `PLY`, `PCD`, `PNG` and `MP4`.
    `ConvertOutputFormat.from_str("ply")` parses a name and raises
    `ValueError` for an unknown one.
- `vivotk.network_trace`: `NetworkTrace(path)` reads one bandwidth sample in
  Kbps per line. `next()` returns the samples in order and wraps around at
  the end.
- `vivotk.camera_trace`: `CameraPosition`, with pitch and yaw in radians, and
  `CameraTrace(path, is_record=False)`. A trace file has lines of
  `x,y,z,pitch,yaw,roll`, with angles in degrees.
  - In replay mode, the file must exist, and `next()` cycles through the
    positions.
  - In record mode, the file must not exist yet. `add(pos)` collects
    positions, and `save()` writes them. If a file has appeared at the path
    by then, `save()` logs a warning and writes nothing. Used as a context
    manager, the trace saves itself on exit.
- `vivotk.fetch_request`: `FrameRequest`, `PCMetadata` and `FetchRequest`.
  A `FetchRequest` is a frame request plus the buffer occupancy. Build one
  with `FetchRequest.from_frame_request(req, buffer_occupancy)`. Convert it
  back with `to_frame_request()` or `to_metadata()`.
- `vivotk.enums`: the player's choices. These are `DecoderType`, `AbrType`,
  `ThroughputPredictionType` and `ViewportPredictionType`.
- `vivotk.args`: the player's command-line options. `build_parser()` returns
  an `argparse` parser. `parse_args(argv)` returns an `Args` dataclass.

## Examples

```python
from vivotk.predictors import ExponentialMovingAverage, LPEMA

ema = ExponentialMovingAverage(0.1)
ema.predict()        # None
ema.add(1.0)
ema.add(2.0)
ema.predict()        # about 1.1

lpema = LPEMA(0.1)
for sample in (1.0, 2.0):
    lpema.add(sample)
lpema.predict()      # about 1.428571
```

```python
from vivotk.velodyne import read_velodyne_bin_file, write_velodyne_bin_file

scan = read_velodyne_bin_file("000000.bin")
len(scan)
write_velodyne_bin_file(scan, "copy.bin")
```

```python
from vivotk.args import parse_args

args = parse_args(["frames/", "--tp", "ema", "--throughput-alpha", "0.2"])
args.src                          # "frames/"
args.fps                          # 30.0
args.throughput_prediction_type   # ThroughputPredictionType.EMA
```

## What the package does not do

The package provides no player and no command to run. `vivotk.args` only
parses the player's options.

The package does not do any of the following:

- render point clouds
- fetch or decode segments, or manage a frame buffer
- select a quality level by adaptive bitrate
- read or write PLY or PCD files, so there is no conversion between formats

`ConvertOutputFormat` only names the formats.

## Running the tests

Install the `test` extra (`pip install -e .[test]`), then run `pytest` from
the project root.