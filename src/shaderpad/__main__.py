from .shaderpad import main

main()
