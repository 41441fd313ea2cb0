from camera_engine.main import main

main()
