CROPS = [
    {"crop":"Wheat",   "ph":{"peak":90,"ideal":(6.0,7.5),"mid":6.75,"slope":20}, "temp":{"band":(15,25),"penalty":0.7},
     "fourth":{"field":"moisture","band":(40,70),"penalty":0.8},            "yield":4.5,
     "notes":("Excellent for wheat cultivation","Consider soil amendments for better yield")},
    {"crop":"Corn",    "ph":{"peak":95,"ideal":(6.0,6.8),"mid":6.4,"slope":25},  "temp":{"band":(20,35),"penalty":0.6},
     "fourth":{"field":"moisture","band":(50,80),"penalty":0.7},            "yield":8.2,
     "notes":("Great conditions for corn","May need higher nitrogen levels")},
    {"crop":"Carrots", "ph":{"peak":88,"ideal":(6.0,7.0),"mid":6.5,"slope":22},  "temp":{"band":(10,25),"penalty":0.6},
     "fourth":{"field":"organicMatter","min":2,"penalty":0.7},              "yield":35,
     "notes":("Perfect for root vegetables","Improve organic matter content")},
    {"crop":"Apples",  "ph":{"peak":85,"ideal":(6.0,7.0),"mid":6.5,"slope":20},  "temp":{"band":(15,30),"penalty":0.7},
     "fourth":{"field":"organicMatter","min":3,"penalty":0.8},              "yield":25,
     "notes":("Suitable for orchard development","Consider long-term soil improvement")},
]

# fertility factor per crop, linear in the nutrient readings
FERTILITY = {
    "Wheat":   lambda s: s.nitrogen / 100,
    "Corn":    lambda s: s.nitrogen / 80,
    "Carrots": lambda s: (s.nitrogen + s.phosphorus + s.potassium) / 150,
    "Apples":  lambda s: (s.phosphorus + s.potassium) / 100,
}
