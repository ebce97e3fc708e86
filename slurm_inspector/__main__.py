from slurm_inspector.cli import main

main()
