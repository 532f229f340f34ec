"""Processing chain of the displayed image: source, deformed, rasterized and resampled."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Any, Callable, List, Optional, Union

from .geometry import Point

RESAMPLE_SCALE_THRESHOLD = 0.8


class ImageChainStage(IntEnum):
    SOURCE_IMAGE = 0
    DEFORMED = 1
    RASTERIZED = 2
    RESAMPLED = 3


_STAGE_COUNT = len(ImageChainStage)


class AxisAlignedRotation(IntEnum):
    """Rotation in clockwise quarter turns."""

    NONE = 0
    ROTATE_90_CW = 1
    ROTATE_180 = 2
    ROTATE_90_CCW = 3


class AxisAlignedFlip(IntFlag):
    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


@dataclass(frozen=True)
class AxisAlignedTransform:
    rotation: AxisAlignedRotation = AxisAlignedRotation.NONE
    flip: AxisAlignedFlip = AxisAlignedFlip.NONE

    @property
    def is_identity(self) -> bool:
        return (
            self.rotation is AxisAlignedRotation.NONE
            and self.flip == AxisAlignedFlip.NONE
        )


_IDENTITY = AxisAlignedTransform()


def _combine(
    current: AxisAlignedTransform,
    relative_rotation: Union[AxisAlignedRotation, int],
    flip: AxisAlignedFlip,
) -> AxisAlignedTransform:
    new_flip = AxisAlignedFlip(flip) ^ current.flip
    single_axis = new_flip in (AxisAlignedFlip.HORIZONTAL, AxisAlignedFlip.VERTICAL)
    direction = -1 if single_axis else 1
    rotation = (4 + int(relative_rotation) * direction + int(current.rotation)) % 4
    return AxisAlignedTransform(AxisAlignedRotation(rotation), new_flip)


def _simplify(transform: AxisAlignedTransform) -> AxisAlignedTransform:
    """Replace a transform with an equivalent one that reads more naturally."""
    both = AxisAlignedFlip.HORIZONTAL | AxisAlignedFlip.VERTICAL
    if transform.rotation is AxisAlignedRotation.NONE and transform.flip == both:
        transform = AxisAlignedTransform(AxisAlignedRotation.ROTATE_180, AxisAlignedFlip.NONE)
    if (
        transform.rotation is AxisAlignedRotation.ROTATE_180
        and transform.flip == AxisAlignedFlip.VERTICAL
    ):
        transform = AxisAlignedTransform(AxisAlignedRotation.NONE, AxisAlignedFlip.HORIZONTAL)
    if (
        transform.rotation is AxisAlignedRotation.ROTATE_90_CW
        and transform.flip == AxisAlignedFlip.HORIZONTAL
    ):
        transform = AxisAlignedTransform(
            AxisAlignedRotation.ROTATE_90_CCW, AxisAlignedFlip.VERTICAL
        )
    if (
        transform.rotation is AxisAlignedRotation.ROTATE_90_CCW
        and transform.flip == AxisAlignedFlip.HORIZONTAL
    ):
        transform = AxisAlignedTransform(
            AxisAlignedRotation.ROTATE_90_CW, AxisAlignedFlip.VERTICAL
        )
    return transform


def compose_transform(
    current: AxisAlignedTransform,
    relative_rotation: Union[AxisAlignedRotation, int],
    flip: AxisAlignedFlip,
) -> AxisAlignedTransform:
    """Apply a further rotation and flip on top of ``current``."""
    return _simplify(_combine(current, relative_rotation, flip))


def _identity(image: Any) -> Any:
    return image


@dataclass
class StageProcessors:
    """The operations the chain uses to produce each stage.

    Images are objects with ``size`` (a Point) and the writable attributes
    ``visible``, ``position``, ``opacity`` and ``scale``.

    - ``deform(image, transform)`` returns the transformed image.
    - ``rasterize(image, use_rainbow)`` returns a renderer-compatible image.
    - ``resample(image, size)`` returns the image resampled to ``size``, or None.
    - ``root(opened)`` picks the image the chain starts from (e.g. a first frame).
    """

    deform: Callable[[Any, AxisAlignedTransform], Any]
    rasterize: Callable[[Any, bool], Any]
    resample: Callable[[Any, Point], Optional[Any]]
    root: Callable[[Any], Any] = field(default=_identity)


class ImageChain:
    """One image slot per processing stage."""

    def __init__(self) -> None:
        self._slots: List[Optional[Any]] = [None] * _STAGE_COUNT

    def get(self, stage: ImageChainStage) -> Optional[Any]:
        return self._slots[stage]

    def set(self, stage: ImageChainStage, image: Optional[Any]) -> None:
        self._slots[stage] = image

    def reset(self) -> None:
        self._slots = [None] * _STAGE_COUNT


class ImageState:
    """User state of the open image and the lazily refreshed processing chain."""

    def __init__(self, processors: StageProcessors) -> None:
        self._processors = processors
        self._transform = _IDENTITY
        self._dirty = ImageChainStage.SOURCE_IMAGE
        self._chain = ImageChain()
        self._opened: Optional[Any] = None
        self._use_rainbow = False
        self._final_stage = ImageChainStage.RASTERIZED
        self._scale = Point(1.0, 1.0)
        self._offset = Point(0.0, 0.0)

    @property
    def opened_image(self) -> Optional[Any]:
        return self._opened

    @property
    def chain(self) -> ImageChain:
        return self._chain

    @property
    def use_rainbow_normalization(self) -> bool:
        return self._use_rainbow

    @property
    def axis_aligned_transform(self) -> AxisAlignedTransform:
        return self._transform

    @property
    def scale(self) -> Point:
        return self._scale

    @property
    def offset(self) -> Point:
        return self._offset

    @property
    def resample(self) -> bool:
        return self._final_stage is ImageChainStage.RESAMPLED

    def _set_dirty(self, stage: ImageChainStage) -> None:
        if stage < self._dirty:
            self._dirty = stage

    def _set_chain_root(self, image: Any) -> None:
        current = self._chain.get(ImageChainStage.SOURCE_IMAGE)
        if current is not None:
            current.visible = False
        self._chain.set(ImageChainStage.SOURCE_IMAGE, image)
        self._set_dirty(ImageChainStage.SOURCE_IMAGE)

    def set_opened_image(self, image: Any) -> None:
        self._opened = image
        self._set_chain_root(self._processors.root(image))

    def clear_all(self) -> None:
        self._chain.reset()
        self._opened = None

    def transform(
        self,
        relative_rotation: Union[AxisAlignedRotation, int],
        flip: AxisAlignedFlip,
    ) -> None:
        """Rotate by quarter turns and flip, relative to the current transform."""
        combined = _combine(self._transform, relative_rotation, flip)
        if combined != self._transform:
            self._transform = _simplify(combined)
            self._set_dirty(ImageChainStage.DEFORMED)

    def reset_user_state(self) -> None:
        self._transform = _IDENTITY
        self._use_rainbow = False
        self._set_dirty(ImageChainStage.DEFORMED)

    def set_use_rainbow_normalization(self, value: bool) -> None:
        if self._use_rainbow != value:
            self._use_rainbow = value
            self._set_dirty(ImageChainStage.RASTERIZED)

    def set_resample(self, resample: bool) -> None:
        target = ImageChainStage.RESAMPLED if resample else ImageChainStage.RASTERIZED
        if self._final_stage is target:
            return
        self._final_stage = target
        if target is ImageChainStage.RASTERIZED:
            rasterized = self._chain.get(ImageChainStage.RASTERIZED)
            if rasterized is not None:
                self._update_image_parameters(rasterized, True)
            self._chain.set(ImageChainStage.RESAMPLED, None)
        else:
            self._set_dirty(ImageChainStage.RESAMPLED)

    def _is_actually_resampled(self) -> bool:
        return self._chain.get(ImageChainStage.RESAMPLED) is not None

    def set_scale(self, scale: Point) -> None:
        if self._scale == scale:
            return
        self._scale = scale
        visible = self.visible_image()
        if visible is not None:
            visible.scale = Point(1.0, 1.0) if self._is_actually_resampled() else scale
        if self.resample:
            self._set_dirty(ImageChainStage.RESAMPLED)

    def set_offset(self, offset: Point) -> None:
        if self._offset == offset:
            return
        self._offset = offset
        visible = self.visible_image()
        if visible is not None:
            visible.position = offset.rounded()

    def _update_image_parameters(self, image: Any, visible: bool) -> None:
        image.visible = visible
        image.position = self._offset
        image.opacity = 1.0

    def visible_image(self) -> Optional[Any]:
        stage = (
            ImageChainStage.RESAMPLED
            if self._is_actually_resampled()
            else ImageChainStage.RASTERIZED
        )
        return self._chain.get(stage)

    def visible_size(self) -> Point:
        """On-screen size of the visible image, scale included."""
        self._refresh(self._final_stage)
        image = self.visible_image()
        if image is None:
            raise ValueError("no image is visible")
        size = image.size
        return size if self._is_actually_resampled() else size * self._scale

    def get_image(self, stage: ImageChainStage) -> Optional[Any]:
        self._refresh(stage)
        return self._chain.get(stage)

    def refresh(self) -> None:
        self._refresh(self._final_stage)

    def _refresh(self, required: ImageChainStage) -> None:
        if self._dirty > required or self._opened is None:
            return
        current = int(self._dirty)
        if max(current - 1, 0) == current:
            current += 1
        max_stage = min(int(required), int(self._final_stage))
        while current <= max_stage:
            stage = ImageChainStage(current)
            previous = ImageChainStage(max(current - 1, 0))
            self._chain.set(stage, self._process(stage, self._chain.get(previous)))
            current += 1
        self._dirty = ImageChainStage(min(max_stage + 1, _STAGE_COUNT - 1)) \
            if max_stage + 1 < _STAGE_COUNT else _CLEAN

    def _process(self, stage: ImageChainStage, image: Any) -> Optional[Any]:
        if stage is ImageChainStage.SOURCE_IMAGE:
            return image
        if stage is ImageChainStage.DEFORMED:
            if self._transform.is_identity:
                return image
            deformed = self._processors.deform(image, self._transform)
            image.visible = False
            return deformed
        if stage is ImageChainStage.RASTERIZED:
            image.visible = False
            rasterized = self._processors.rasterize(image, self._use_rainbow)
            rasterized.scale = self._scale
            self._update_image_parameters(rasterized, True)
            return rasterized
        if stage is ImageChainStage.RESAMPLED:
            if (
                self._scale.x > RESAMPLE_SCALE_THRESHOLD
                or self._scale.y > RESAMPLE_SCALE_THRESHOLD
            ):
                return None
            rasterized = self._chain.get(ImageChainStage.RASTERIZED)
            target = (rasterized.size * self._scale).rounded()
            resampled = self._processors.resample(rasterized, target)
            if resampled is None:
                return None
            resampled.scale = Point(1.0, 1.0)
            image.visible = False
            self._update_image_parameters(resampled, True)
            return resampled
        raise ValueError(f"unexpected stage {stage!r}")


class _Clean(int):
    """Dirty marker past the last stage: nothing needs processing."""


_CLEAN = _Clean(_STAGE_COUNT)