from setuptools import setup, find_packages

setup(
    name='voronoi_mesh',
    version='0.1.0',
    packages=find_packages(include=['voronoi_mesh', 'voronoi_mesh.*']),
    python_requires='>=3.10',
    install_requires=[
        'torch',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'voronoi-mesh=voronoi_mesh.cli:main'
        ]
    }
)
