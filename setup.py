from setuptools import setup, find_packages

setup(
    name="rnmat",
    version="0.1",
    description="Exact rational numbers and dense rational matrices",
    long_description=("Exact rational arithmetic with canonical lowest-terms numbers and a dense, rectangular "
                      "matrix container of rational numbers for exact linear-algebra primitives"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["rnmat", "rnmat.*"]),
    install_requires=["numpy", "scipy", "sympy"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["rational numbers", "fractions", "exact arithmetic", "matrix"],
    zip_safe=False,
)
