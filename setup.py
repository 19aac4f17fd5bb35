from setuptools import setup, find_packages

setup(
    name='jaeger-propagator',
    version='1.0.0',
    description='Jaeger uber-trace-id and uberctx-* header propagation for Python',
    long_description='',
    license='Apache-2.0',
    python_requires='>=3.6',
    install_requires=[
        'basictracer>=3.0,<4',
        'opentracing>=2.0,<3',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
    ],

    keywords=[
        'opentracing',
        'jaeger',
        'propagation',
        'tracing',
        'microservices',
        'distributed'
    ],
    packages=find_packages(exclude=['docs*', 'tests*', 'sample*']),
)
