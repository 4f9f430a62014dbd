from setuptools import setup

setup(
    name="mst-compare",
    version="0.1.0",
    description="Prim and Kruskal minimum spanning tree engines with cross-validation (NetworkX backend)",
    packages=["mst_compare"],
    python_requires=">=3.9",
    install_requires=[
        "networkx>=3.2",
        "numpy>=1.21",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "scipy>=1.9",
        ],
    },
    entry_points={
        "networkx.backends": ["mst = mst_compare.backend:backend"],
        "networkx.backend_info": ["mst = mst_compare.info:get_info"],
    },
)
