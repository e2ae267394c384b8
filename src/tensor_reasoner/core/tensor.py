"""
Dense Tensors for Tensor Reasoner

Mathematical basis:
    Vector:  v ∈ R^n         (rank 1)
    Matrix:  M ∈ R^(m×n)     (rank 2)

Matrix product:
    C[i,j] = Σ_k A[i,k] * B[k,j]  = einsum('ik,kj->ij', A, B)

Element-wise apply over N tensors of equal shape:
    C[i,j] = op(T1[i,j], T2[i,j], ..., TN[i,j])

Only ranks 1 and 2 are supported; higher ranks are rejected at construction.
Values are stored as float64 on the CPU.
"""

import torch
from typing import Callable, List, Optional, Sequence, Tuple, Union

from .errors import (
    EmptyInputError,
    IncompatibleShapeError,
    IncompatibleTypesError,
    InvalidShapeError,
    UnsupportedRankError,
)

MAX_RANK = 2
DTYPE = torch.float64

Nested = Union[float, Sequence["Nested"]]


def _check_shape(shape: Sequence[int]) -> Tuple[int, ...]:
    """Validate a dimension list and return it as a tuple."""
    if shape is None or len(shape) == 0:
        raise InvalidShapeError("Tensor shape must have at least one dimension")

    dims = tuple(shape)
    for dim in dims:
        if isinstance(dim, bool) or not isinstance(dim, int) or dim <= 0:
            raise InvalidShapeError(f"Dimensions must be positive integers, got {list(dims)}")

    if len(dims) > MAX_RANK:
        raise UnsupportedRankError(f"Rank {len(dims)} is not supported (max {MAX_RANK})")

    return dims


class Tensor:
    """
    Dense tensor of rank 1 or 2.

    Attributes:
        shape: Dimension sizes
        rank:  len(shape)
        size:  Sum of the dimension sizes. This is a descriptive field,
               not the element count; use numel for the product.
        data:  Backing torch.Tensor [*shape]
    """

    def __init__(self, shape: Sequence[int], values: Optional[Nested] = None):
        """
        Create a tensor.

        Args:
            shape: Non-empty list of positive dimension sizes
            values: Nested lists matching shape exactly (zero-filled if omitted)
        """
        self.shape = _check_shape(shape)

        if values is None:
            self.data = torch.zeros(self.shape, dtype=DTYPE)
        else:
            try:
                data = torch.as_tensor(values, dtype=DTYPE).clone()
            except (TypeError, ValueError) as e:
                raise InvalidShapeError(f"Values do not form a dense array: {e}") from e
            if tuple(data.shape) != self.shape:
                raise InvalidShapeError(
                    f"Values have shape {list(data.shape)}, expected {list(self.shape)}"
                )
            self.data = data

    @classmethod
    def from_torch(cls, data: torch.Tensor) -> "Tensor":
        """Wrap a torch tensor (copied, cast to float64)."""
        return cls(tuple(data.shape), data.detach().to(device="cpu", dtype=DTYPE))

    @classmethod
    def zeros(cls, shape: Sequence[int]) -> "Tensor":
        return cls(shape)

    @classmethod
    def identity(cls, n: int) -> "Tensor":
        """n×n identity matrix."""
        _check_shape([n, n])
        return cls.from_torch(torch.eye(n, dtype=DTYPE))

    @property
    def rank(self) -> int:
        return len(self.shape)

    @property
    def size(self) -> int:
        return sum(self.shape)

    @property
    def numel(self) -> int:
        return self.data.numel()

    @property
    def values(self) -> List:
        """Nested Python lists (a fresh copy)."""
        return self.data.tolist()

    def __getitem__(self, index):
        value = self.data[index]
        if value.dim() == 0:
            return value.item()
        return value.tolist()

    def __setitem__(self, index, value: float):
        self.data[index] = value

    def __matmul__(self, other: "Tensor") -> "Tensor":
        return multiply(self, other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.shape == other.shape and torch.equal(self.data, other.data)

    __hash__ = None

    def allclose(self, other: "Tensor", atol: float = 1e-9) -> bool:
        """Shape-equal and every entry within atol."""
        if not isinstance(other, Tensor):
            raise IncompatibleTypesError(f"Expected Tensor, got {type(other).__name__}")
        return self.shape == other.shape and torch.allclose(
            self.data, other.data, rtol=0.0, atol=atol
        )

    def __repr__(self) -> str:
        return f"Tensor(shape={list(self.shape)}, values={self.values})"


def create_tensor(shape: Sequence[int], values: Optional[Nested] = None) -> Tensor:
    """Create a tensor; see Tensor.__init__."""
    return Tensor(shape, values)


def multiply(a: Tensor, b: Tensor) -> Tensor:
    """
    Rank-2 matrix product.

    C = A @ B,  C[i,j] = Σ_k A[i,k] * B[k,j]

    Args:
        a: [m, k] tensor
        b: [k, n] tensor

    Returns:
        C: [m, n] tensor
    """
    for operand in (a, b):
        if not isinstance(operand, Tensor):
            raise IncompatibleTypesError(
                f"multiply expects Tensor operands, got {type(operand).__name__}"
            )
    for operand in (a, b):
        if operand.rank != 2:
            raise UnsupportedRankError(f"multiply requires rank 2, got rank {operand.rank}")
    if a.shape[1] != b.shape[0]:
        raise IncompatibleShapeError(
            f"Inner dimensions differ: {list(a.shape)} @ {list(b.shape)}"
        )

    return Tensor.from_torch(torch.mm(a.data, b.data))


def transpose(t: Tensor) -> Tensor:
    """M^T for rank 2; a copy for rank 1."""
    if not isinstance(t, Tensor):
        raise IncompatibleTypesError(f"Expected Tensor, got {type(t).__name__}")
    if t.rank == 1:
        return Tensor.from_torch(t.data)
    return Tensor.from_torch(t.data.t())


def apply_elementwise(
    tensors: Sequence[Tensor],
    op: Callable[[torch.Tensor], torch.Tensor],
) -> Tensor:
    """
    Apply op across a list of equally shaped tensors.

    The inputs are stacked along a new leading dimension, so op receives
    a torch.Tensor [num_inputs, *shape] whose slice [:, i, j] is the
    per-coordinate value list in input order. op must return [*shape].

    Args:
        tensors: Non-empty list of tensors sharing one shape
        op: Reduction over dim 0

    Returns:
        Tensor with the shape of tensors[0]
    """
    if not tensors:
        raise EmptyInputError("apply_elementwise needs at least one tensor")

    for t in tensors:
        if not isinstance(t, Tensor):
            raise IncompatibleTypesError(f"Expected Tensor, got {type(t).__name__}")

    # Rank is bounded at construction
    shape = tensors[0].shape
    for t in tensors[1:]:
        if t.shape != shape:
            raise IncompatibleShapeError(
                f"Element-wise operands differ in shape: {list(shape)} vs {list(t.shape)}"
            )

    stacked = torch.stack([t.data for t in tensors], dim=0)
    result = op(stacked)

    if tuple(result.shape) != shape:
        raise IncompatibleShapeError(
            f"Element-wise op returned shape {list(result.shape)}, expected {list(shape)}"
        )

    return Tensor.from_torch(result)
