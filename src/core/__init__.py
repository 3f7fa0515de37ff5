"""Engine core: window loop, GL scene, meshes and lights."""
