import pylibnoise as pln
import matplotlib.pyplot as plt
import numpy as np
import time

# Lowlands: gentle Perlin flattened through a curve
lowlands = pln.Curve(
	pln.Perlin(frequency=2.0, persistence=0.25, octave_count=6, seed=1),
	control_points=[(-1.0, -1.0), (-0.25, -0.35), (0.25, -0.2), (1.0, 0.0)],
)

# Mountains: ridged multifractal
mountains = pln.RidgedMultifractal(frequency=1.5, octave_count=8, seed=2)

# Coarse mask choosing between the two
mask = pln.Perlin(frequency=0.5, persistence=0.25, octave_count=4, seed=3)

terrain = pln.Select(lowlands, mountains, mask, minimum=0.0, maximum=1000.0, fall_off=0.125)
terrain = pln.Turbulence(terrain, power=0.125, frequency=4.0, roughness=2, seed=4)

nx, ny = 512, 512
nmap = pln.NoiseMap2D(nx, ny, generator=terrain)

st = time.time()
nmap.generate_planar(pln.LEFT, pln.RIGHT, pln.TOP, pln.BOTTOM, seamless=True)
print(f"generated {nx}x{ny} in {time.time() - st:.2f} s")

Z = nmap.get_data()

fig, ax = plt.subplots(1, 3, figsize=(15, 5))
ax[0].imshow(Z, cmap="gist_earth", vmin=-1, vmax=1)
ax[0].set_title("height")

# seamless: tile 2x2, no visible seam
ax[1].imshow(np.tile(Z, (2, 2)), cmap="gist_earth", vmin=-1, vmax=1)
ax[1].set_title("2x2 tiling")

ax[2].imshow(np.asarray(pln.render.to_normal_map(nmap, scale=8.0)))
ax[2].set_title("normal map")

for a in ax:
	a.axis("off")
plt.tight_layout()
plt.show()

pln.render.to_image(nmap, pln.render.Gradient.terrain()).save("terrain.png")
