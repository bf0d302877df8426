from setuptools import setup, find_packages

setup(
    name="fieldmatrix",
    version="1.0",
    url="https://github.com/klamt-lab/fieldmatrix.git",
    description="Exact matrix algebra over arbitrary fields",
    long_description=("Exact matrix algebra over arbitrary fields, offering row operations, matrix multiplication "
                      "and Gauss-Jordan elimination over the rationals, prime fields and binary extension fields "
                      "such as the GF(2^8) used by Reed-Solomon codes"),
    long_description_content_type="text/plain",
    author="Philipp Schneider",
    author_email="zgddtgt@gmail.com",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["fieldmatrix", "fieldmatrix.*"]),
    install_requires=["numpy", "scipy", "sympy"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    project_urls={
        "Bug Reports": "https://github.com/klamt-lab/fieldmatrix/issues",
        "Source": "https://github.com/klamt-lab/fieldmatrix/",
    },
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear algebra", "finite field", "Gauss-Jordan elimination", "Reed-Solomon"],
    zip_safe=False,
)
