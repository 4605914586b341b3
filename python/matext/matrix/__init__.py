"""
Fixed-size matrix primitives: eigenvalues, operator norms, exponential,
Iwasawa and Cartan decompositions.
"""
from matext.matrix.eigen import eigenvalues, characteristic_polynomial
from matext.matrix.norms import norm_l1, norm_l2, norm_linf
from matext.matrix.exponential import expm
from matext.matrix.decomposition import iwasawa_decomposition, cartan_decomposition

__all__ = [
    "eigenvalues",
    "characteristic_polynomial",
    "norm_l1",
    "norm_l2",
    "norm_linf",
    "expm",
    "iwasawa_decomposition",
    "cartan_decomposition",
]
