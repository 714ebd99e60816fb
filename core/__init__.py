"""Assessment pipeline core"""
