from setuptools import setup, find_packages

setup(
    name='occtl',
    version='0.1.0',
    packages=find_packages(),
    include_package_data=True,
    install_requires=[
        'typer[all]',
        'python-dotenv',
        'pyyaml',
        'jsonschema'
    ],
    extras_require={
        'test': [
            'pytest'
        ]
    },
    entry_points={
        'console_scripts': [
            'occtl=occtl.cli:app'
        ]
    },
    description='A CLI to save OpenShift clusters and log into them with oc login',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
