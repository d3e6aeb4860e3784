import setuptools

setuptools.setup(
    name="microparsec",
    version="0.1.0",
    license="MIT License",
    description="Minimal parser combinators over Unicode text",
    package_dir={"": "src"},
    packages=setuptools.find_namespace_packages(where="src"),
    python_requires=">=3.8",
    install_requires=["typing_extensions"],
    extras_require={"test": ["pytest", "hypothesis"]},
    zip_safe=False,
)
